"""
Tests for SprocGenerator, generate_code and output sinks.
"""

import io

import pytest

from sprocgen import (
    DirectorySink,
    GeneratedCode,
    OutputSink,
    SprocGenerator,
    StreamSink,
    generate_code,
)
from sprocgen.cli import main


class RecordingSink(OutputSink):
    """Sink that keeps everything written to it."""

    def __init__(self):
        self.written = []

    def write(self, table_name, procedures, record_class):
        self.written.append((table_name, procedures, record_class))


class TestGenerateCode:
    """Test the pure generation entry point."""

    def test_widgets(self, widgets_table, options):
        code = generate_code(widgets_table, options)
        assert isinstance(code, GeneratedCode)
        assert code.table_name == "Widgets"
        assert "CREATE PROCEDURE stp_Widgets_ins" in code.procedures
        assert "public class Widgets" in code.record_class

    def test_identical_output(self, widgets_table, options):
        """Test generating twice gives byte-identical output."""
        assert generate_code(widgets_table, options) == generate_code(widgets_table, options)

    def test_default_options(self, widgets_table):
        code = generate_code(widgets_table)
        assert not code.procedures.startswith("USE")
        assert "namespace Generated {" in code.record_class


class TestSprocGenerator:
    """Test the orchestrator."""

    def test_generate_from_backend(self, frame_backend, options):
        generator = SprocGenerator(frame_backend, options=options)
        code = generator.generate("Widgets")
        assert "INSERT INTO Widgets (name, price)" in code.procedures

    def test_column_order_from_catalog(self, frame_backend):
        """Test catalog rows out of order are generated in column_id order."""
        code = SprocGenerator(frame_backend).generate("Widgets")
        assert "SELECT name, price\n" in code.procedures

    def test_process_table_writes_to_sink(self, frame_backend):
        sink = RecordingSink()
        code = SprocGenerator(frame_backend, sink).process_table("Employee")
        assert sink.written == [("Employee", code.procedures, code.record_class)]

    def test_process_tables(self, frame_backend):
        sink = RecordingSink()
        results = SprocGenerator(frame_backend, sink).process_tables(["Widgets", "Employee"])
        assert [code.table_name for code in results] == ["Widgets", "Employee"]
        assert [entry[0] for entry in sink.written] == ["Widgets", "Employee"]

    def test_mixed_types(self, frame_backend):
        code = SprocGenerator(frame_backend).generate("Employee")
        assert "\t@badge uniqueidentifier(16) " in code.procedures
        assert "\t@notes text ,\n" in code.procedures
        assert "public DateTime hired { get; set; }" in code.record_class
        assert "public string badge { get; set; }" in code.record_class
        assert "hired = new DateTime(1900, 1, 1);" in code.record_class

    def test_context_manager(self, frame_backend):
        with SprocGenerator(frame_backend) as generator:
            assert generator.generate("Widgets").table_name == "Widgets"


class TestSinks:
    """Test output sinks."""

    def test_directory_sink(self, widgets_table, tmp_path):
        code = generate_code(widgets_table)
        sink = DirectorySink(tmp_path / "out")
        sink.write(code.table_name, code.procedures, code.record_class)

        assert (tmp_path / "out" / "CREATE_Widgets.sql").read_text(encoding="utf-8") == code.procedures
        assert (tmp_path / "out" / "Widgets.cs").read_text(encoding="utf-8") == code.record_class

    def test_directory_sink_patterns(self, tmp_path):
        sink = DirectorySink(tmp_path, sql_pattern="{table}.sql", class_pattern="{table}Record.cs")
        assert sink.paths("Widgets") == (tmp_path / "Widgets.sql", tmp_path / "WidgetsRecord.cs")

    def test_stream_sink(self):
        stream = io.StringIO()
        StreamSink(stream).write("Widgets", "PROCS", "CLASS")
        assert stream.getvalue() == "PROCS\nCLASS\n"


class TestCli:
    """Test the command line entry point."""

    def test_generate_from_catalog_csv(self, catalog_frame, tmp_path):
        catalog_path = tmp_path / "catalog.csv"
        catalog_frame.to_csv(catalog_path, index=False)
        output_dir = tmp_path / "generated"

        status = main(
            [
                "--catalog-csv", str(catalog_path),
                "--database", "Internal",
                "--table", "Widgets",
                "--table", "Employee",
                "--output-dir", str(output_dir),
            ]
        )

        assert status == 0
        assert (output_dir / "CREATE_Widgets.sql").read_text(encoding="utf-8").startswith("USE Internal\n")
        assert (output_dir / "Employee.cs").exists()

    def test_stdout(self, catalog_frame, tmp_path, capsys):
        catalog_path = tmp_path / "catalog.csv"
        catalog_frame.to_csv(catalog_path, index=False)

        status = main(["--catalog-csv", str(catalog_path), "--table", "Widgets", "--stdout", "--prefix", "usp"])

        assert status == 0
        assert "CREATE PROCEDURE usp_Widgets_sel" in capsys.readouterr().out

    def test_unknown_table_fails(self, catalog_frame, tmp_path):
        catalog_path = tmp_path / "catalog.csv"
        catalog_frame.to_csv(catalog_path, index=False)

        assert main(["--catalog-csv", str(catalog_path), "--table", "Missing", "--stdout"]) == 1

    def test_table_required(self):
        with pytest.raises(SystemExit):
            main([])
