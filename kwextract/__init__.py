"""Extraction and validation of keyword arguments against a schema."""

from .api import KeywordFunction, takes_keywords
from .extract import KeywordExtractor, extract_keywords, get_kwargs
from .options import OptionError, get_options, set_options
from .schema import KeywordSchema
from .utils import (
    UNSPECIFIED,
    ExtractionLog,
    KeywordArgumentError,
    MissingKeywordError,
    SchemaError,
    TraceListener,
    UnknownKeywordError,
    keyword_error,
    message_and_class,
    tracer,
)
