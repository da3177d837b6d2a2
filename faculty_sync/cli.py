from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ValidationError

from faculty_sync.dto.faculty_dto import FacultyDocumentDTO
from faculty_sync.logging_setup import setup_logging
from faculty_sync.schema import describe_schema
from faculty_sync.services.sync_service import SyncDirection, synchronize_data

logger = logging.getLogger(__name__)


def _read_json(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _write_json(obj: Any, path: Optional[str]) -> None:
    text = json.dumps(obj, indent=2, ensure_ascii=False, default=str)
    if path:
        Path(path).write_text(text + "\n", encoding="utf-8")
    else:
        sys.stdout.write(text + "\n")


def _to_jsonable(result: BaseModel) -> Dict[str, Any]:
    if isinstance(result, FacultyDocumentDTO):
        return result.to_document(json_mode=True)
    return result.model_dump(mode="json")


def run_map(direction: str, input_path: str, output_path: Optional[str]) -> int:
    try:
        data: Union[Dict[str, Any], List[Dict[str, Any]]] = _read_json(input_path)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot read input %s: %s", input_path, e)
        return 2

    records = data if isinstance(data, list) else [data]
    out: List[Dict[str, Any]] = []
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            logger.error("Record %d is not a JSON object", i)
            return 2
        try:
            out.append(_to_jsonable(synchronize_data(direction, rec)))
        except ValidationError as e:
            logger.error("Record %d does not fit the %s input shape: %s", i, direction, e)
            return 2

    logger.info("Mapped %d record(s) %s", len(out), direction)
    _write_json(out if isinstance(data, list) else out[0], output_path)
    return 0


def run_schema(output_path: Optional[str]) -> int:
    _write_json(describe_schema(), output_path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="faculty-sync",
        description="Map faculty records between the SQL and MongoDB schemas",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_map = sub.add_parser("map", help="Map a JSON record (or list of records)")
    p_map.add_argument(
        "--direction",
        required=True,
        choices=[d.value for d in SyncDirection],
        help="Mapping direction",
    )
    p_map.add_argument("input", nargs="?", default="-", help="Input JSON file (default: stdin)")
    p_map.add_argument("--output", "-o", default=None, help="Output file (default: stdout)")

    p_schema = sub.add_parser("schema", help="Print the document store schema as JSON")
    p_schema.add_argument("--output", "-o", default=None, help="Output file (default: stdout)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("faculty_sync")

    if args.command == "map":
        return run_map(args.direction, args.input, args.output)
    return run_schema(args.output)


if __name__ == "__main__":
    raise SystemExit(main())
