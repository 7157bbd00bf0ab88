import asyncio
import threading

import httpx
import pytest

from scraper.exceptions import FetchError, NotFoundError, ScraperError
from scraper.extractor import ProjectExtractor
from scraper.fetcher import MEFFetcher
from scraper.orchestrator import ProjectOrchestrator


def make_orchestrator(client) -> ProjectOrchestrator:
    return ProjectOrchestrator(fetcher=MEFFetcher(client=client))


def test_fetch_project_runs_full_pipeline(mock_client, page):
    client = mock_client({
        "2595080": (200, page(nombre="CREACION DEL PUENTE", rows=[["2025", "x", "2,000.00", "1,000.00", "500.00", "200.00"]])),
    })

    record = asyncio.run(make_orchestrator(client).fetch_project("2595080", year=2025))

    assert record.cui == "2595080"
    assert record.nombre == "CREACION DEL PUENTE"
    assert record.pim == 2000.0
    assert record.porcentaje_cert == 50.0
    assert record.porcentaje_dev == 10.0


def test_fetch_project_propagates_not_found(mock_client, page):
    client = mock_client({"9": (200, page(nombre=""))})

    with pytest.raises(NotFoundError):
        asyncio.run(make_orchestrator(client).fetch_project("9", year=2025))


def test_unexpected_extraction_error_is_wrapped():
    class BrokenExtractor:
        def extract(self, cui, html, year=None):
            raise RuntimeError("html roto")

    class StaticFetcher:
        async def fetch(self, cui):
            return "<html></html>"

    orchestrator = ProjectOrchestrator(fetcher=StaticFetcher(), extractor=BrokenExtractor())

    with pytest.raises(ScraperError) as exc:
        asyncio.run(orchestrator.fetch_project("1"))

    assert "Error al extraer datos: html roto" in str(exc.value)


def test_batch_keeps_order_and_isolates_failures(mock_client, page):
    client = mock_client({
        "A": (200, page(nombre="Proyecto A", rows=[["2025", "x", "100", "10", "10", "10"]])),
        "B": httpx.ConnectError("connection reset"),
        "C": (200, page(nombre="Proyecto C", with_table=False)),
    })

    batch = asyncio.run(make_orchestrator(client).fetch_projects(["A", "B", "C"], year=2025))

    assert [record.cui for record in batch.results] == ["A", "C"]
    assert len(batch.errors) == 1
    assert batch.errors[0].cui == "B"
    assert "connection reset" in batch.errors[0].error
    assert batch.total == 3
    assert batch.successful == 2
    assert batch.failed == 1


def test_batch_records_not_found_as_error(mock_client, page):
    client = mock_client({
        "A": (200, page(nombre="")),
        "B": (200, page(nombre="Proyecto B", with_table=False)),
    })

    batch = asyncio.run(make_orchestrator(client).fetch_projects(["A", "B"], year=2025))

    assert batch.errors[0].error == "Error al extraer datos: No se encontró proyecto con CUI A"
    assert batch.total == len(batch.results) + len(batch.errors)


def test_batch_processes_cuis_sequentially():
    events = []

    class TracingFetcher:
        async def fetch(self, cui):
            events.append(f"start {cui}")
            await asyncio.sleep(0)
            events.append(f"end {cui}")
            if cui == "2":
                raise FetchError("caído")
            return f'<td id="td_nominv">Proyecto {cui}</td>'

    orchestrator = ProjectOrchestrator(fetcher=TracingFetcher())
    batch = asyncio.run(orchestrator.fetch_projects(["1", "2", "3"], year=2025))

    assert events == ["start 1", "end 1", "start 2", "end 2", "start 3", "end 3"]
    assert batch.successful == 2
    assert batch.failed == 1


def test_empty_batch():
    batch = asyncio.run(ProjectOrchestrator().fetch_projects([]))

    assert batch.model_dump() == {
        "results": [],
        "errors": [],
        "total": 0,
        "successful": 0,
        "failed": 0,
    }


def test_errors_are_prefixed_and_keep_their_type(mock_client, page):
    client = mock_client({
        "9": (200, page(nombre="")),
        "down": httpx.ReadTimeout("timed out"),
    })
    orchestrator = make_orchestrator(client)

    with pytest.raises(NotFoundError) as not_found:
        asyncio.run(orchestrator.fetch_project("9", year=2025))
    with pytest.raises(FetchError) as fetch_error:
        asyncio.run(orchestrator.fetch_project("down", year=2025))

    assert str(not_found.value) == "Error al extraer datos: No se encontró proyecto con CUI 9"
    assert not_found.value.cui == "9"
    assert str(fetch_error.value).startswith("Error al extraer datos: Timeout")
    assert isinstance(fetch_error.value.cause, httpx.ReadTimeout)


def test_extraction_runs_outside_event_loop_thread():
    threads = {}

    class StaticFetcher:
        async def fetch(self, cui):
            threads["fetch"] = threading.get_ident()
            return '<td id="td_nominv">PROYECTO</td>'

    class TracingExtractor(ProjectExtractor):
        def extract(self, cui, html, year=None):
            threads["extract"] = threading.get_ident()
            return super().extract(cui, html, year)

    orchestrator = ProjectOrchestrator(fetcher=StaticFetcher(), extractor=TracingExtractor())
    record = asyncio.run(orchestrator.fetch_project("1", year=2025))

    assert record.nombre == "PROYECTO"
    assert threads["extract"] != threads["fetch"]
