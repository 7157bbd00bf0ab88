from typing import List, Optional, Sequence

import httpx
import pytest


def build_page(nombre: str = "", rows: Optional[List[Sequence[str]]] = None, with_table: bool = True) -> str:
    """HTML con la forma de la ficha SSI: nombre en #td_nominv e historial anual."""
    table = ""
    if with_table:
        body = ""
        for row in rows or []:
            cells = "".join(f"<td>{cell}</td>" for cell in row)
            body += f'<tr class="fil_hisfinan">{cells}</tr>'
        table = (
            '<table id="tb_hist_anual">'
            "<tr><th>Año</th><th>Costo</th><th>PIM</th><th>Certif.</th><th>Comp.</th><th>Dev.</th></tr>"
            f"{body}</table>"
        )
    return (
        "<html><body><table><tr>"
        f'<td id="td_nominv">{nombre}</td>'
        f"</tr></table>{table}</body></html>"
    )


@pytest.fixture
def page():
    return build_page


@pytest.fixture
def mock_client():
    """AsyncClient cuyo upstream responde según un dict CUI -> (status, html) o excepción."""

    def _make(responses):
        def handler(request: httpx.Request) -> httpx.Response:
            cui = request.url.params.get("codigo")
            response = responses[cui]
            if isinstance(response, Exception):
                raise response
            status_code, html = response
            return httpx.Response(status_code, text=html)

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
