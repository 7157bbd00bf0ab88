"""JSON Schema para validación de registros de proyecto."""

_AMOUNT = {"type": "number"}
_PERCENTAGE = {"type": "number"}

PROJECT_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Proyecto de inversión (SSI MEF)",
    "type": "object",
    "required": [
        "cui", "nombre", "pim", "certificacion", "compromiso_anual", "devengado",
        "porcentaje_cert", "porcentaje_comp", "porcentaje_dev"
    ],
    "properties": {
        "cui": {"type": "string", "minLength": 1},
        "nombre": {"type": "string", "minLength": 1},
        "pim": _AMOUNT,
        "certificacion": _AMOUNT,
        "compromiso_anual": _AMOUNT,
        "devengado": _AMOUNT,
        "porcentaje_cert": _PERCENTAGE,
        "porcentaje_comp": _PERCENTAGE,
        "porcentaje_dev": _PERCENTAGE
    },
    "additionalProperties": False
}
