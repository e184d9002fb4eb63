"""Spark brainstorming module"""
from .models import SparkErrorResponse, SparkRequest, SparkResponse, SparkType
from .spark_service import (
    NO_SUGGESTIONS,
    SparkError,
    SparkQuotaError,
    SparkRateLimitError,
    SparkService,
)

__all__ = [
    'SparkType',
    'SparkRequest',
    'SparkResponse',
    'SparkErrorResponse',
    'SparkService',
    'SparkError',
    'SparkRateLimitError',
    'SparkQuotaError',
    'NO_SUGGESTIONS',
]
