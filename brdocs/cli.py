from __future__ import annotations
import argparse
import random
import sys
from typing import List, Optional, Sequence

from brdocs.errors import DocumentError
from brdocs.models import CNPJ, CPF, DocumentKind
from brdocs.services.document_validator import is_valid
from brdocs.services.generator import generate_cpf, generate_cpf_formatted

_TYPES = {DocumentKind.CPF: CPF, DocumentKind.CNPJ: CNPJ}

def _kind(value: str) -> DocumentKind:
    try:
        return DocumentKind.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="brdocs", description="Valida, formata e gera CPF/CNPJ.")
    sub = ap.add_subparsers(dest="command", required=True)

    v = sub.add_parser("validate", help="valida um ou mais documentos")
    v.add_argument("--kind", type=_kind, default=DocumentKind.CPF, help="cpf (default) ou cnpj")
    v.add_argument("values", nargs="+")

    f = sub.add_parser("format", help="converte para a forma canônica (com máscara)")
    f.add_argument("--kind", type=_kind, default=DocumentKind.CPF, help="cpf (default) ou cnpj")
    f.add_argument("values", nargs="+")

    g = sub.add_parser("generate", help="gera CPFs válidos aleatórios")
    g.add_argument("-n", "--count", type=int, default=1)
    g.add_argument("--formatted", action="store_true", help="com máscara ddd.ddd.ddd-dd")
    g.add_argument("--seed", type=int, default=None, help="semente para saída reproduzível")
    return ap

def _validate(kind: DocumentKind, values: Sequence[str]) -> int:
    status = 0
    for value in values:
        ok = is_valid(value, kind)
        print(f"{value}\t{'válido' if ok else 'inválido'}")
        if not ok:
            status = 1
    return status

def _format(kind: DocumentKind, values: Sequence[str]) -> int:
    status = 0
    for value in values:
        try:
            print(_TYPES[kind](value).formatted)
        except DocumentError as e:
            print(f"✖ {e}", file=sys.stderr)
            status = 1
    return status

def _generate(count: int, formatted: bool, seed: Optional[int]) -> int:
    if count < 1:
        print("✖ --count deve ser >= 1", file=sys.stderr)
        return 2
    rng = random.Random(seed) if seed is not None else None
    gen = generate_cpf_formatted if formatted else generate_cpf
    for _ in range(count):
        print(gen(rng))
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "validate":
        return _validate(args.kind, args.values)
    if args.command == "format":
        return _format(args.kind, args.values)
    return _generate(args.count, args.formatted, args.seed)

if __name__ == "__main__":
    sys.exit(main())
