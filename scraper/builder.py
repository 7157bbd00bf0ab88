"""Construcción de ProjectRecord con montos y porcentajes de ejecución."""

from scraper.models import ProjectRecord


def calculate_percentage(value: float, pim: float) -> float:
    """Porcentaje de `value` sobre el PIM; 0 si el PIM no es positivo."""
    if pim > 0:
        return value / pim * 100
    return 0.0


def build_empty_record(cui: str, nombre: str) -> ProjectRecord:
    """Registro con todos los montos en 0."""
    return ProjectRecord(cui=cui, nombre=nombre)


def build_record(
    cui: str,
    nombre: str,
    pim: float,
    certificacion: float,
    compromiso_anual: float,
    devengado: float
) -> ProjectRecord:
    """Registro completo con los tres porcentajes calculados sobre el PIM."""
    return ProjectRecord(
        cui=cui,
        nombre=nombre,
        pim=pim,
        certificacion=certificacion,
        compromiso_anual=compromiso_anual,
        devengado=devengado,
        porcentaje_cert=calculate_percentage(certificacion, pim),
        porcentaje_comp=calculate_percentage(compromiso_anual, pim),
        porcentaje_dev=calculate_percentage(devengado, pim)
    )
