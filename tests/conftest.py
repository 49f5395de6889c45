# tests/conftest.py
"""
Shared fixtures: small definition source documents, and a builder that runs
the schema compiler on them and imports the generated module as a Store.
"""

import importlib.util
import itertools
import json
from pathlib import Path

import pytest

from hl7_definitions.compiler import write_schema
from hl7_definitions.config import BuildConfig
from hl7_definitions.store import Store

ROOT = Path(__file__).resolve().parents[1]

_module_ids = itertools.count()


def _tables_doc():
    return {
        "3": {
            "desc": "Event type",
            "values": {
                "A01": "ADT/ACK - Admit/visit notification",
                "A08": "ADT/ACK -  Update patient information",
            },
        },
        "91": {
            "desc": "Query priority",
            "values": {"D": "Deferred", "I": "Immediate"},
        },
    }


def _defs_doc():
    return {
        "2.4": {
            "fields": {"ST": {"desc": "String data", "subfields": []}},
            "segments": {},
            "messages": {},
        },
        "2.5.1": {
            "fields": {
                "ST": {"desc": "String Data", "subfields": []},
                "TS": {
                    "desc": "Time Stamp",
                    "subfields": [
                        {"datatype": "DTM", "desc": "Time", "opt": 2, "rep": 1, "len": 24},
                        {
                            "datatype": "ID",
                            "desc": "Degree of Precision",
                            "opt": 4,
                            "rep": 1,
                            "len": 1,
                            "table": 529,
                        },
                    ],
                },
            },
            "segments": {
                "MSH": {
                    "desc": "Message Header",
                    "fields": [
                        {"datatype": "ST", "desc": "Field Separator", "opt": 2, "rep": 1, "len": 1},
                        {"datatype": "ST", "desc": "Security", "opt": 1, "rep": 1, "len": 40},
                        {
                            "datatype": "ID",
                            "desc": "Character Set",
                            "opt": 1,
                            "rep": 0,
                            "len": 16,
                            "table": 211,
                        },
                        {"datatype": "ST", "desc": "Application Error Parameter", "opt": 3, "rep": 10},
                        {"datatype": "ST", "desc": "Legacy", "opt": 0, "rep": 1},
                    ],
                },
            },
            "messages": {
                "ADT_A01": {
                    "desc": "Admit/Visit Notification",
                    "name": "ADT_A01",
                    "segments": {
                        "desc": "ADT_A01 segments",
                        "segments": [
                            {"name": "MSH", "desc": "Message Header", "min": 1, "max": 1},
                            {
                                "name": "PROCEDURE",
                                "desc": "Procedure group",
                                "min": 0,
                                "max": 99999,
                                "children": [
                                    {"name": "PR1", "desc": "Procedures", "min": 1, "max": 1},
                                    {
                                        "name": "DETAIL",
                                        "desc": "Nested group",
                                        "min": 0,
                                        "max": 1,
                                        "children": [
                                            {"name": "ROL", "desc": "Role", "min": 0, "max": 99999}
                                        ],
                                    },
                                ],
                            },
                            {
                                "name": "ANY",
                                "desc": "Choice",
                                "min": 0,
                                "max": 1,
                                "compounds": [
                                    {"name": "RDF", "desc": "Table Row Definition", "min": 0, "max": 1},
                                    {"desc": "Any HL7 segment", "min": 0, "max": 1},
                                ],
                            },
                        ],
                    },
                },
            },
        },
    }


@pytest.fixture
def tables_doc():
    """A fresh, mutable copy of the sample table catalog."""
    return _tables_doc()


@pytest.fixture
def defs_doc():
    """A fresh, mutable copy of the sample definitions catalog."""
    return _defs_doc()


@pytest.fixture
def write_sources(tmp_path):
    """
    Write tables.json / defs.json into a fresh directory and return it.
    Raw strings are written verbatim so tests can supply invalid JSON.
    """

    def _write(tables=None, defs=None):
        d = tmp_path / f"sources_{next(_module_ids)}"
        d.mkdir()
        for name, doc, default in (
            ("tables.json", tables, _tables_doc),
            ("defs.json", defs, _defs_doc),
        ):
            if doc is None:
                doc = default()
            text = doc if isinstance(doc, str) else json.dumps(doc)
            (d / name).write_text(text, encoding="utf-8")
        return d

    return _write


def load_generated(path: Path):
    """Import a generated store module from an arbitrary path."""
    name = f"_hl7_generated_{next(_module_ids)}"
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def build_store(tmp_path, write_sources):
    """
    Compile sources (the samples by default) and return the resulting Store.
    """

    def _build(tables=True, versions=("2.5.1",), source_dir=None):
        cfg = BuildConfig(
            tables=tables,
            versions=frozenset(versions),
            source_dir=source_dir or write_sources(),
            output=tmp_path / "generated" / f"store_{next(_module_ids)}.py",
        )
        return Store.from_module(load_generated(write_schema(cfg)))

    return _build


@pytest.fixture
def import_generated():
    return load_generated
