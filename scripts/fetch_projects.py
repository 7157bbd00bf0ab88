#!/usr/bin/env python3
"""
Script independiente para consultar proyectos del MEF sin levantar la API.

Uso:
    python scripts/fetch_projects.py 2595080 2234567
    python scripts/fetch_projects.py --file cuis.txt --output data/proyectos.json
    python scripts/fetch_projects.py 2595080 --year 2024 --validate
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List

# Agregar directorio raíz al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from scraper.models import BatchResult
from scraper.orchestrator import ProjectOrchestrator
from scraper.validator import RecordValidator


def read_cuis(args: argparse.Namespace) -> List[str]:
    """CUIs de la línea de comandos y/o del archivo (uno por línea, # comenta)."""
    cuis = list(args.cuis)

    if args.file:
        for line in Path(args.file).read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                cuis.append(line)

    return cuis


def validate_batch(batch: BatchResult) -> int:
    """Valida cada registro y retorna la cantidad de registros inválidos."""
    validator = RecordValidator()
    invalid = 0

    for record in batch.results:
        validation = validator.validate(record.model_dump())
        if not validation["is_valid"]:
            invalid += 1
            print(f"   ❌ CUI {record.cui}: {validation['total_errors']} errores")
            for error in validation["errors"]:
                print(f"      - {error['field']}: {error['error']}")

    return invalid


def main():
    """Función principal."""
    parser = argparse.ArgumentParser(
        description="Consulta datos financieros de proyectos en el SSI del MEF"
    )
    parser.add_argument(
        "cuis",
        nargs="*",
        help="CUIs a consultar"
    )
    parser.add_argument(
        "--file",
        default=None,
        help="Archivo de texto con un CUI por línea"
    )
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Año del historial (default: año actual)"
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Archivo JSON de salida (si no se indica, imprime en pantalla)"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Valida cada registro contra el schema"
    )

    args = parser.parse_args()

    if args.file and not Path(args.file).exists():
        print(f"❌ Error: El archivo de CUIs no existe: {args.file}")
        sys.exit(1)

    cuis = read_cuis(args)
    if not cuis:
        print("❌ Error: Se requiere al menos un CUI")
        sys.exit(1)

    print("=" * 60)
    print("CONSULTA DE PROYECTOS MEF")
    print("=" * 60)
    print(f"📋 CUIs: {len(cuis)}")
    if args.year:
        print(f"📅 Año: {args.year}")
    print()

    try:
        orchestrator = ProjectOrchestrator()
        batch = asyncio.run(orchestrator.fetch_projects(cuis, year=args.year))
    except KeyboardInterrupt:
        print("\n\n⚠️  Proceso interrumpido por el usuario")
        sys.exit(1)

    output = json.dumps(batch.model_dump(), indent=2, ensure_ascii=False)
    if args.output:
        output_file = Path(args.output)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(output, encoding="utf-8")
    else:
        print(output)

    print("\n" + "=" * 60)
    print("📊 RESULTADO")
    print("=" * 60)
    print(f"📄 Total CUIs: {batch.total}")
    print(f"✅ Exitosos: {batch.successful}")
    print(f"❌ Fallidos: {batch.failed}")
    for error in batch.errors:
        print(f"   - {error.cui}: {error.error}")
    if args.output:
        print(f"💾 Archivo salida: {args.output}")

    invalid = 0
    if args.validate:
        print("\n🔎 Validando registros...")
        invalid = validate_batch(batch)
        if invalid == 0:
            print("🎯 VALIDACIÓN: ✅ EXITOSA")

    sys.exit(0 if batch.failed == 0 and invalid == 0 else 1)


if __name__ == "__main__":
    main()
