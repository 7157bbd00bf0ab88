"""
Documento HTML consultable.

El extractor sólo necesita tres operaciones sobre la página del MEF
(texto de un campo, existencia de un elemento y filas de una tabla), así que
se encapsulan aquí para no depender de la API de BeautifulSoup en el resto
del código.
"""

from typing import List

from bs4 import BeautifulSoup


class HTMLDocument:
    """Wrapper mínimo sobre BeautifulSoup con selectores CSS."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html or "", "html.parser")

    def find_text(self, selector: str) -> str:
        """
        Texto del primer elemento que calza con el selector.

        Returns:
            Texto sin espacios al inicio/final, o "" si no existe
        """
        element = self.soup.select_one(selector)
        if element is None:
            return ""
        return element.get_text().strip()

    def exists(self, selector: str) -> bool:
        """Indica si hay al menos un elemento para el selector."""
        return self.soup.select_one(selector) is not None

    def find_rows(self, row_selector: str) -> List[List[str]]:
        """
        Filas de una tabla como listas de textos de celda (<td>).

        Args:
            row_selector: Selector CSS de las filas (ej: "#tabla .fila")

        Returns:
            Lista de filas en orden del documento; cada fila es la lista de
            textos de sus celdas, sin recortar.
        """
        rows = []
        for row in self.soup.select(row_selector):
            rows.append([cell.get_text() for cell in row.find_all("td")])
        return rows
