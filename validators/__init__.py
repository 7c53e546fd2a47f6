"""
Validators for parsed analysis documents.
"""

from validators.schema_validator import SchemaValidator
from validators.locale_validator import LocaleValidator, LanguagePredicate, is_default_language_only

__all__ = ['SchemaValidator', 'LocaleValidator', 'LanguagePredicate', 'is_default_language_only']
