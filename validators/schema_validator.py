"""
SchemaValidator for turning a parsed document into a typed AnalysisResult.
"""

import json
from typing import Any, Dict, List

from pydantic import ValidationError

from models import AnalysisResult, SchemaInvalid


class SchemaValidator:
    """Validates record shapes with detailed error reporting."""

    MAX_REPORTED_ISSUES = 5

    @staticmethod
    def describe_errors(error: ValidationError) -> List[str]:
        """Compact 'path: message' lines for the first few violations."""
        issues = []
        for err in error.errors()[:SchemaValidator.MAX_REPORTED_ISSUES]:
            path = '.'.join(str(part) for part in err['loc']) or '<root>'
            issues.append(f"{path}: {err['msg']}")
        return issues

    @staticmethod
    def validate(document: Dict[str, Any]) -> AnalysisResult:
        """Build the typed result. Raises SchemaInvalid on missing or malformed fields."""
        try:
            return AnalysisResult.model_validate(document)
        except ValidationError as e:
            issues = SchemaValidator.describe_errors(e)
            raise SchemaInvalid(
                "Analysis document failed schema validation: " + "; ".join(issues),
                stage="validate",
                snippet=json.dumps(document, ensure_ascii=False)
            ) from e
