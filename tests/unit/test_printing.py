"""Tests for pdfspool.printing package."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pdfspool.config import ScalingMode
from pdfspool.exceptions import ConfigError, PrinterError, PrintJobError
from pdfspool.papersize import PAPER_SIZES, PaperSize
from pdfspool.printing import (
    CupsBackend,
    MockBackend,
    PrintJob,
    SumatraBackend,
    get_backend,
    get_default_backend,
)
from pdfspool.printing.sumatra import find_sumatra_pdf, paper_name_for


def make_job(path="doc.pdf", paper=PAPER_SIZES["letter"], scaling=ScalingMode.FIT, printer="Office"):
    return PrintJob(pdf_path=Path(path), printer=printer, paper_size=paper, scaling=scaling)


class TestPrintJob:
    """Test the job value object."""

    def test_title_defaults_to_file_name(self):
        assert make_job("/tmp/x/report.pdf").job_title == "report.pdf"


class TestCupsBackend:
    """Test the lp/lpstat backend."""

    def test_build_command_fit(self):
        cmd = CupsBackend().build_command(make_job())

        assert cmd[:5] == ["lp", "-d", "Office", "-t", "doc.pdf"]
        assert "sides=two-sided-long-edge" in cmd
        assert "job-hold-until=no-hold" in cmd
        assert "media=Custom.612x792" in cmd
        assert "print-scaling=fit" in cmd
        assert "fit-to-page" in cmd
        assert cmd[-1] == "doc.pdf"

    def test_build_command_actual(self):
        cmd = CupsBackend().build_command(make_job(scaling=ScalingMode.ACTUAL))

        assert "print-scaling=none" in cmd
        assert "fit-to-page" not in cmd

    def test_build_command_fractional_size(self):
        cmd = CupsBackend().build_command(make_job(paper=PAPER_SIZES["a4"]))
        assert "media=Custom.595.28x841.89" in cmd

    def test_build_command_rejects_bad_size(self):
        with pytest.raises(PrintJobError, match="Invalid paper size"):
            CupsBackend().build_command(make_job(paper=PaperSize(0.0, 792.0)))

    def test_list_printers(self, cups_on_path, mock_subprocess_run):
        mock_subprocess_run.return_value = MagicMock(
            returncode=0, stdout="HP_LaserJet\nOffice\n\n", stderr=""
        )
        assert CupsBackend().list_printers() == ["HP_LaserJet", "Office"]
        assert mock_subprocess_run.call_args[0][0] == ["lpstat", "-e"]

    def test_list_printers_none_configured(self, cups_on_path, mock_subprocess_run):
        mock_subprocess_run.return_value = MagicMock(
            returncode=1, stdout="", stderr="lpstat: No destinations added."
        )
        assert CupsBackend().list_printers() == []

    def test_list_printers_failure(self, cups_on_path, mock_subprocess_run):
        mock_subprocess_run.return_value = MagicMock(
            returncode=1, stdout="", stderr="lpstat: Unable to connect to server"
        )
        with pytest.raises(PrinterError, match="lpstat failed"):
            CupsBackend().list_printers()

    def test_list_printers_without_cups(self):
        with patch("shutil.which", return_value=None):
            with pytest.raises(PrinterError, match="not found in PATH"):
                CupsBackend().list_printers()

    def test_submit_success(self, cups_on_path, mock_subprocess_run):
        mock_subprocess_run.return_value = MagicMock(
            returncode=0, stdout="request id is Office-12 (1 file(s))", stderr=""
        )
        assert CupsBackend().submit(make_job()) is True
        cmd = mock_subprocess_run.call_args[0][0]
        assert cmd[0] == "lp"

    def test_submit_rejected(self, cups_on_path, mock_subprocess_run):
        mock_subprocess_run.return_value = MagicMock(
            returncode=1, stdout="", stderr="lp: The printer or class does not exist."
        )
        with pytest.raises(PrintJobError, match="does not exist") as exc_info:
            CupsBackend().submit(make_job())
        assert exc_info.value.path == Path("doc.pdf")

    def test_submit_without_lp(self, mock_subprocess_run):
        with patch("shutil.which", return_value=None):
            with pytest.raises(PrinterError, match="not found in PATH"):
                CupsBackend().submit(make_job())
        mock_subprocess_run.assert_not_called()

    def test_dry_run(self, mock_subprocess_run):
        assert CupsBackend().submit(make_job(), dry_run=True) is True
        mock_subprocess_run.assert_not_called()


class TestSumatraBackend:
    """Test the SumatraPDF backend."""

    def test_paper_name_for_named_sizes(self):
        assert paper_name_for(make_job(paper=PAPER_SIZES["a4"])) == "A4"
        assert paper_name_for(make_job(paper=PAPER_SIZES["letter"])) == "letter"

    def test_paper_name_for_custom_size(self):
        assert paper_name_for(make_job(paper=PaperSize(300.0, 400.0))) is None

    def test_build_command_fit(self):
        backend = SumatraBackend()
        cmd = backend.build_command(make_job(paper=PAPER_SIZES["a4"]), Path("C:/tools/SumatraPDF.exe"))

        assert cmd[1:4] == ["-silent", "-print-to", "Office"]
        assert cmd[cmd.index("-print-settings") + 1] == "duplexlong,fit,paper=A4"
        assert cmd[-1] == "doc.pdf"

    def test_build_command_actual_custom_size(self):
        backend = SumatraBackend()
        job = make_job(paper=PaperSize(300.0, 400.0), scaling=ScalingMode.ACTUAL)
        cmd = backend.build_command(job, Path("SumatraPDF.exe"))

        assert cmd[cmd.index("-print-settings") + 1] == "duplexlong,noscale"

    def test_list_printers(self, mock_win32print):
        assert SumatraBackend().list_printers() == ["Printer 1", "Printer 2", "Label Printer"]

    def test_list_printers_without_pywin32(self):
        with patch.dict("sys.modules", {"win32print": None}):
            with pytest.raises(PrinterError, match="win32print"):
                SumatraBackend().list_printers()

    def test_submit_success(self, temp_dir, mock_subprocess_run):
        exe = temp_dir / "SumatraPDF.exe"
        exe.touch()
        assert SumatraBackend(sumatra_path=exe).submit(make_job()) is True
        assert mock_subprocess_run.call_args[0][0][0] == str(exe)

    def test_submit_failure(self, temp_dir, mock_subprocess_run):
        exe = temp_dir / "SumatraPDF.exe"
        mock_subprocess_run.side_effect = subprocess.CalledProcessError(1, "SumatraPDF", stderr="printer offline")
        with pytest.raises(PrintJobError, match="printer offline"):
            SumatraBackend(sumatra_path=exe).submit(make_job())

    def test_submit_missing_executable(self, temp_dir, mock_subprocess_run):
        mock_subprocess_run.side_effect = FileNotFoundError()
        with pytest.raises(PrinterError, match="SumatraPDF not found"):
            SumatraBackend(sumatra_path=temp_dir / "SumatraPDF.exe").submit(make_job())

    def test_sumatra_not_found(self, temp_dir, monkeypatch):
        monkeypatch.delenv("PDFSPOOL_SUMATRA_PATH", raising=False)
        monkeypatch.chdir(temp_dir)
        with patch("shutil.which", return_value=None):
            with pytest.raises(PrinterError, match="SumatraPDF.exe not found"):
                SumatraBackend().submit(make_job())

    def test_find_from_environment(self, temp_dir, monkeypatch):
        exe = temp_dir / "SumatraPDF.exe"
        exe.touch()
        monkeypatch.setenv("PDFSPOOL_SUMATRA_PATH", str(exe))
        assert find_sumatra_pdf() == exe

    def test_find_in_current_directory(self, temp_dir, monkeypatch):
        monkeypatch.delenv("PDFSPOOL_SUMATRA_PATH", raising=False)
        (temp_dir / "SumatraPDF.exe").touch()
        monkeypatch.chdir(temp_dir)
        assert find_sumatra_pdf() == temp_dir / "SumatraPDF.exe"

    def test_dry_run(self, mock_subprocess_run, monkeypatch, temp_dir):
        monkeypatch.delenv("PDFSPOOL_SUMATRA_PATH", raising=False)
        monkeypatch.chdir(temp_dir)
        with patch("shutil.which", return_value=None):
            assert SumatraBackend().submit(make_job(), dry_run=True) is True
        mock_subprocess_run.assert_not_called()


class TestMockBackend:
    """Test the recording backend."""

    def test_records_jobs(self):
        backend = MockBackend()
        job = make_job()
        assert backend.submit(job) is True
        assert backend.jobs == [job]

    def test_default_printers(self):
        assert MockBackend().list_printers() == ["Mock Printer 1", "Mock Printer 2"]

    def test_empty_printer_list(self):
        assert MockBackend(printers=[]).list_printers() == []

    def test_fail_on_submit(self):
        with pytest.raises(PrintJobError):
            MockBackend(fail_on_submit=True).submit(make_job())

    def test_reset(self):
        backend = MockBackend()
        backend.submit(make_job())
        backend.reset()
        assert backend.jobs == []


class TestFactory:
    """Test backend selection."""

    def test_get_backend_by_name(self):
        assert isinstance(get_backend("cups"), CupsBackend)
        assert isinstance(get_backend("sumatra"), SumatraBackend)
        assert isinstance(get_backend("MOCK"), MockBackend)

    def test_unknown_backend(self):
        with pytest.raises(ConfigError, match="Unknown printer backend"):
            get_backend("lpr")

    def test_environment_variable(self, monkeypatch):
        monkeypatch.setenv("PDFSPOOL_BACKEND", "mock")
        assert isinstance(get_backend(), MockBackend)

    def test_default_on_windows(self):
        with patch.object(sys, "platform", "win32"):
            assert isinstance(get_default_backend(), SumatraBackend)

    def test_default_elsewhere(self):
        with patch.object(sys, "platform", "linux"):
            assert isinstance(get_default_backend(), CupsBackend)

    def test_auto(self, monkeypatch):
        monkeypatch.delenv("PDFSPOOL_BACKEND", raising=False)
        with patch.object(sys, "platform", "darwin"):
            assert isinstance(get_backend("auto"), CupsBackend)
