"""Validador de registros de proyecto contra schema y consistencia de porcentajes."""

from typing import Dict, List

import jsonschema

from scraper.builder import calculate_percentage
from scraper.json_schema import PROJECT_SCHEMA

# (campo porcentaje, campo monto)
PERCENTAGE_FIELDS = [
    ("porcentaje_cert", "certificacion"),
    ("porcentaje_comp", "compromiso_anual"),
    ("porcentaje_dev", "devengado"),
]


class RecordValidator:
    """Valida el JSON de un ProjectRecord."""

    def __init__(self, tolerance: float = 1e-6):
        self.tolerance = tolerance

    def validate(self, data: Dict) -> Dict:
        """
        Validación completa: schema + porcentajes.

        Returns: {
            "is_valid": bool,
            "total_errors": int,
            "errors": [{"section": str, "field": str, "error": str, ...}]
        }
        """
        errors = self._validate_schema(data)

        # Sin schema válido no tiene sentido revisar los cálculos
        if not errors:
            errors.extend(self._validate_percentages(data))

        return {
            "is_valid": len(errors) == 0,
            "total_errors": len(errors),
            "errors": errors
        }

    def _validate_schema(self, data: Dict) -> List[Dict]:
        """Valida contra JSON Schema."""
        errors = []
        try:
            jsonschema.validate(instance=data, schema=PROJECT_SCHEMA)
        except jsonschema.ValidationError as e:
            errors.append({
                "section": "schema",
                "field": ".".join(str(p) for p in e.path) if e.path else "root",
                "error": e.message,
                "expected": None,
                "actual": None
            })
        except jsonschema.SchemaError as e:
            errors.append({
                "section": "schema",
                "field": "schema_definition",
                "error": f"Schema inválido: {e.message}",
                "expected": None,
                "actual": None
            })

        return errors

    def _validate_percentages(self, data: Dict) -> List[Dict]:
        """Cada porcentaje debe ser monto / PIM * 100 (o 0 si PIM <= 0)."""
        errors = []
        pim = data["pim"]

        for percentage_field, amount_field in PERCENTAGE_FIELDS:
            expected = calculate_percentage(data[amount_field], pim)
            actual = data[percentage_field]
            if abs(expected - actual) > self.tolerance:
                errors.append({
                    "section": "porcentajes",
                    "field": percentage_field,
                    "error": f"{percentage_field} no corresponde a {amount_field} / pim * 100",
                    "expected": expected,
                    "actual": actual
                })

        return errors
