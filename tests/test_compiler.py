"""
Tests for hl7_definitions.compiler
"""

import logging
from pathlib import Path

import pytest

from hl7_definitions import compiler
from hl7_definitions.compiler import (
    compile_definitions,
    compile_schema,
    compile_tables,
    lower_message,
    lower_subfield,
    parse_table_id,
    version_ident,
    write_schema,
)
from hl7_definitions.config import BuildConfig, load_config
from hl7_definitions.exceptions import CompileError, SourceError
from hl7_definitions.models import (
    FieldOptionality,
    FieldRepeatability,
    MessageCompound,
    SubField,
)
from hl7_definitions.query import DEFAULT_STORE
from hl7_definitions.source import SourceMessage, SourceSubField, SourceTable
from hl7_definitions.store import Store

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def _capture_warnings(caplog):
    caplog.set_level(logging.INFO, logger="hl7_definitions")


# ------------------------------------------------------------------------------
# parse_table_id / version_ident
# ------------------------------------------------------------------------------


@pytest.mark.parametrize("raw, expected", [("0", 0), ("3", 3), ("0091", 91), ("65535", 65535)])
def test_parse_table_id_accepts_u16(raw, expected):
    assert parse_table_id(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "-1", "+3", "3.0", " 3", "٣"])
def test_parse_table_id_rejects_non_numeric(raw):
    with pytest.raises(CompileError, match=r"is not an unsigned integer"):
        parse_table_id(raw)


def test_parse_table_id_rejects_out_of_range():
    with pytest.raises(CompileError, match=r"^Table id '65536' is out of range"):
        parse_table_id("65536")


def test_version_ident():
    assert version_ident("2.5.1") == "2_5_1"
    with pytest.raises(CompileError, match=r"^Version '2.5-beta' is not a valid"):
        version_ident("2.5-beta")


# ------------------------------------------------------------------------------
# lowering
# ------------------------------------------------------------------------------


def test_lower_subfield_keeps_every_attribute():
    src = SourceSubField(datatype="ID", desc="Character Set", opt=1, rep=0, len=16, table=211)
    assert lower_subfield(src) == SubField(
        "ID",
        "Character Set",
        FieldOptionality.OPTIONAL,
        FieldRepeatability.unbounded(),
        16,
        211,
    )


def test_lower_subfield_unknown_optionality_is_backward_compatibility():
    src = SourceSubField(datatype="ST", desc="Legacy", opt=7, rep=3)
    sub = lower_subfield(src)
    assert sub.optionality is FieldOptionality.BACKWARD_COMPATIBILITY
    assert sub.repeatability == FieldRepeatability.bounded(3)
    assert sub.max_length is None and sub.table is None


def test_lower_message_preserves_nesting(defs_doc):
    src = SourceMessage.model_validate(defs_doc["2.5.1"]["messages"]["ADT_A01"])
    msg = lower_message(src)
    assert [s.name for s in msg.segments] == ["MSH", "PROCEDURE", "ANY"]
    group = msg.segments[1]
    assert [c.name for c in group.children] == ["PR1", "DETAIL"]
    assert group.children[1].children[0].name == "ROL"
    assert group.compounds is None
    assert msg.segments[2].children is None
    assert msg.segments[2].compounds == (
        MessageCompound("RDF", "Table Row Definition", 0, 1),
        MessageCompound(None, "Any HL7 segment", 0, 1),
    )


def test_lower_message_rejects_inverted_bounds(defs_doc):
    raw = defs_doc["2.5.1"]["messages"]["ADT_A01"]
    raw["segments"]["segments"][1]["children"][0]["min"] = 5
    src = SourceMessage.model_validate(raw)
    with pytest.raises(CompileError, match=r"PROCEDURE / PR1: min 5 exceeds max 1"):
        lower_message(src)


def test_lower_message_zero_max_is_unchecked(defs_doc):
    raw = defs_doc["2.5.1"]["messages"]["ADT_A01"]
    raw["segments"]["segments"][0].update({"min": 1, "max": 0})
    msg = lower_message(SourceMessage.model_validate(raw))
    assert msg.segments[0].max == 0


# ------------------------------------------------------------------------------
# table pass
# ------------------------------------------------------------------------------


def test_compile_tables_disabled_emits_empty_maps(caplog):
    text = compile_tables(None)
    assert "TABLE_DESCRIPTIONS = MappingProxyType({})" in text
    assert "TABLES = MappingProxyType({})" in text
    assert "TABLE_ENTRIES = MappingProxyType({})" in text
    assert "Tables not enabled" in caplog.text


def test_compile_tables_sorts_ids_numerically():
    tables = {
        "91": SourceTable(desc="Query priority", values={"D": "Deferred"}),
        "3": SourceTable(desc="Event type", values={"A01": "Admit"}),
    }
    text = compile_tables(tables)
    assert text.index("TABLE_3 =") < text.index("TABLE_91 =")
    assert "    3: 'Event type',\n" in text
    assert "    91: TABLE_91,\n" in text
    assert "    91: TABLE_91_ENTRIES,\n" in text


def test_compile_tables_emits_static_entries_in_source_order():
    tables = {
        "91": SourceTable(desc="Query priority", values={"I": "Immediate", "D": "Deferred"}),
        "76": SourceTable(desc="Message type", values={}),
    }
    text = compile_tables(tables)
    assert "TABLE_91_ENTRIES = (\n    ('I', 'Immediate'),\n    ('D', 'Deferred'),\n)\n" in text
    assert "TABLE_76_ENTRIES = ()\n" in text


def test_compile_tables_rejects_bad_id():
    with pytest.raises(CompileError, match=r"^Table id 'x1' is not an unsigned"):
        compile_tables({"x1": SourceTable(desc="d", values={})})


def test_compile_tables_rejects_duplicate_ids():
    tables = {
        "7": SourceTable(desc="a", values={}),
        "007": SourceTable(desc="b", values={}),
    }
    with pytest.raises(CompileError, match=r"^Duplicate table id '007'"):
        compile_tables(tables)


# ------------------------------------------------------------------------------
# definitions pass
# ------------------------------------------------------------------------------


def test_compile_definitions_skips_disabled_versions(caplog):
    text = compile_definitions({}, ["2.5.1"])
    assert "DEFINITIONS = MappingProxyType({})" in text
    assert "VERSIONS = ()" in text
    assert "Version 2.5.1 enabled but not present" in caplog.text


def test_build_skips_versions_not_enabled(build_store, caplog):
    store = build_store(versions=("2.5.1",))
    assert store.versions == ("2.5.1",)
    assert store.get_definition("2.4") is None
    assert "Version 2.4 not enabled; version 2.4 will NOT be available" in caplog.text


def test_build_with_nothing_enabled(build_store):
    store = build_store(tables=False, versions=())
    assert store.versions == ()
    assert store.get_definition("2.5.1") is None
    assert store.table_description(3) is None


def test_build_without_tables_keeps_definitions(build_store):
    store = build_store(tables=False)
    assert store.table_description(3) is None
    assert store.table_value(3, "A01") is None
    assert store.table_values(91) is None
    assert store.get_segment("2.5.1", "MSH") is not None
    assert store.get_message("2.5.1", "ADT_A01") is not None


def test_build_rejects_bad_version_identifier(write_sources, defs_doc, tmp_path):
    defs_doc["2.5-beta"] = defs_doc.pop("2.4")
    cfg = BuildConfig(
        versions=frozenset({"2.5-beta"}),
        source_dir=write_sources(defs=defs_doc),
        output=tmp_path / "gen.py",
    )
    with pytest.raises(CompileError, match=r"^Version '2.5-beta'"):
        compile_schema(cfg)


# ------------------------------------------------------------------------------
# compile_schema / write_schema
# ------------------------------------------------------------------------------


def test_compile_schema_is_deterministic(write_sources, tmp_path):
    cfg = BuildConfig(
        tables=True,
        versions=frozenset({"2.4", "2.5.1"}),
        source_dir=write_sources(),
        output=tmp_path / "gen.py",
    )
    assert compile_schema(cfg) == compile_schema(cfg)


def test_compile_schema_ignores_source_key_order(write_sources, tables_doc, defs_doc, tmp_path):
    reordered_tables = dict(reversed(list(tables_doc.items())))
    fields = defs_doc["2.5.1"]["fields"]
    defs_doc["2.5.1"]["fields"] = dict(reversed(list(fields.items())))

    def _compile(tables, defs):
        return compile_schema(
            BuildConfig(
                tables=True,
                versions=frozenset({"2.5.1"}),
                source_dir=write_sources(tables=tables, defs=defs),
                output=tmp_path / "gen.py",
            )
        )

    assert _compile(reordered_tables, defs_doc) == _compile(None, None)


def test_compile_schema_does_not_read_tables_when_disabled(write_sources, tmp_path):
    src = write_sources(tables="{broken")
    cfg = BuildConfig(versions=frozenset({"2.5.1"}), source_dir=src, output=tmp_path / "g.py")
    assert "TABLES = MappingProxyType({})" in compile_schema(cfg)
    with pytest.raises(SourceError):
        compile_schema(cfg.override(tables=True))


def test_write_schema_leaves_no_output_on_failure(write_sources, tables_doc, tmp_path):
    tables_doc["abc"] = {"desc": "bad", "values": {}}
    out = tmp_path / "out" / "gen.py"
    cfg = BuildConfig(tables=True, source_dir=write_sources(tables=tables_doc), output=out)
    with pytest.raises(CompileError, match=r"'abc'"):
        write_schema(cfg)
    assert not out.exists()


def test_write_schema_interrupted_write_keeps_previous_module(
    write_sources, tmp_path, monkeypatch
):
    out = tmp_path / "gen.py"
    out.write_text("# previous build\n", encoding="utf-8")
    cfg = BuildConfig(tables=True, source_dir=write_sources(), output=out)

    def _fail(src, dst):
        raise OSError("No space left on device")

    monkeypatch.setattr(compiler.os, "replace", _fail)
    with pytest.raises(OSError, match=r"^No space left"):
        write_schema(cfg)
    assert out.read_text(encoding="utf-8") == "# previous build\n"
    assert [p.name for p in tmp_path.iterdir() if p.is_file()] == ["gen.py"]


def test_write_schema_replaces_existing_module(write_sources, tmp_path):
    out = tmp_path / "gen.py"
    out.write_text("X = (\n", encoding="utf-8")
    cfg = BuildConfig(source_dir=write_sources(), output=out)
    write_schema(cfg)
    assert out.read_text(encoding="utf-8") == compile_schema(cfg)
    assert sorted(p.name for p in tmp_path.iterdir() if p.is_file()) == ["gen.py"]


def test_write_schema_creates_parent_dirs(write_sources, tmp_path):
    out = tmp_path / "a" / "b" / "gen.py"
    cfg = BuildConfig(source_dir=write_sources(), output=out)
    assert write_schema(cfg) == out
    assert out.read_text(encoding="utf-8").startswith("# Generated by hl7_definitions")


# ------------------------------------------------------------------------------
# compiled store round trip
# ------------------------------------------------------------------------------


def test_compiled_segment_preserves_order_and_attributes(build_store):
    msh = build_store().get_segment("2.5.1", "MSH")
    assert msh.description == "Message Header"
    assert [f.description for f in msh.fields] == [
        "Field Separator",
        "Security",
        "Character Set",
        "Application Error Parameter",
        "Legacy",
    ]
    charset = msh.fields[2]
    assert charset.datatype == "ID"
    assert charset.optionality is FieldOptionality.OPTIONAL
    assert charset.repeatability == FieldRepeatability.unbounded()
    assert charset.max_length == 16
    assert charset.table == 211
    assert msh.fields[3].optionality is FieldOptionality.CONDITIONAL
    assert msh.fields[3].repeatability == FieldRepeatability.bounded(10)
    assert msh.fields[4].optionality is FieldOptionality.BACKWARD_COMPATIBILITY


def test_compiled_field_keeps_subfields(build_store):
    store = build_store()
    ts = store.get_field("2.5.1", "TS")
    assert ts.description == "Time Stamp"
    assert [s.datatype for s in ts.subfields] == ["DTM", "ID"]
    assert ts.subfields[1].optionality is FieldOptionality.BACKWARD_COMPATIBILITY
    assert ts.subfields[1].table == 529
    assert store.get_field("2.5.1", "ST").subfields == ()


def test_compiled_message_preserves_tree(build_store):
    msg = build_store().get_message("2.5.1", "ADT_A01")
    assert msg.name == "ADT_A01"
    assert msg.description == "Admit/Visit Notification"
    msh, group, choice = msg.segments
    assert (msh.name, msh.min, msh.max) == ("MSH", 1, 1)
    assert group.children[1].children[0].name == "ROL"
    assert group.children[1].children[0].max == 99999
    assert [c.name for c in choice.compounds] == ["RDF", None]


def test_compiled_tables(build_store):
    store = build_store()
    assert store.table_description(3) == "Event type"
    assert store.table_value(3, "A08") == "ADT/ACK -  Update patient information"
    assert set(store.table_values(91)) == {("D", "Deferred"), ("I", "Immediate")}


# ------------------------------------------------------------------------------
# shipped store
# ------------------------------------------------------------------------------


def test_shipped_store_matches_shipped_sources(tmp_path, import_generated):
    cfg = load_config(ROOT / "hl7defs.yaml").override(output=tmp_path / "gen.py")
    store = Store.from_module(import_generated(write_schema(cfg)))
    assert store == DEFAULT_STORE


def test_shipped_module_is_up_to_date():
    cfg = load_config(ROOT / "hl7defs.yaml")
    shipped = Path(compiler.__file__).with_name("_generated.py")
    assert compile_schema(cfg) == shipped.read_text(encoding="utf-8")
