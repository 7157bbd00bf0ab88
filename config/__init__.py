"""Constantes y selectores de los sitios scrapeados."""
