"""
Unit tests for the about command: row building, rendering and the
maintenance check.
"""
from datetime import datetime

from aboutkit.about import SEPARATOR, AboutCommand
from tests.fixtures.mock_data import create_mock_release

NOW = datetime(2027, 7, 21, 10, 0, 0)


def section_values(rows, title):
    """Label -> value for the rows under one section title."""
    values = {}
    current = None
    for row in rows:
        if row is SEPARATOR:
            continue
        if len(row) == 1:
            current = row[0]
        elif current == f"[green]{title}[/]":
            values[row[0]] = row[1]
    return values


class TestBuildRows:
    def test_framework_section(self, kernel, release, output):
        rows = AboutCommand(kernel, release, console=output).build_rows(NOW)
        values = section_values(rows, "Framework")
        assert rows[0] == ("[green]Framework[/]",)
        assert rows[1] is SEPARATOR
        assert values["Version"] == "1.4.2"
        assert values["Long-Term Support"] == "Yes"
        assert values["End of maintenance"] == "07/2027 ([yellow]in 10 days[/])"
        assert values["End of life"] == "07/2028 ([yellow]in 376 days[/])"

    def test_expired_dates_marked(self, kernel, output):
        release = create_mock_release(version="1.3.9", end_of_maintenance="01/2025", end_of_life="07/2025")
        values = section_values(AboutCommand(kernel, release, console=output).build_rows(NOW), "Framework")
        assert values["Long-Term Support"] == "No"
        assert values["End of maintenance"] == "01/2025 [red]Expired[/]"
        assert values["End of life"] == "07/2025 [red]Expired[/]"

    def test_kernel_section(self, kernel, release, output):
        values = section_values(AboutCommand(kernel, release, console=output).build_rows(NOW), "Kernel")
        assert values["Type"] == "aboutkit.kernel.Kernel"
        assert values["Environment"] == "test"
        assert values["Debug"] == "false"
        assert values["Charset"] == "UTF-8"
        assert values["Cache directory"] == "./var/cache/test ([yellow]3 KiB[/])"
        assert values["Log directory"] == "./var/log ([yellow]100 B[/])"

    def test_missing_directories_show_zero(self, tmp_path, release, output):
        from aboutkit.kernel import Kernel

        kernel = Kernel(environment="prod", project_dir=str(tmp_path))
        values = section_values(AboutCommand(kernel, release, console=output).build_rows(NOW), "Kernel")
        assert values["Cache directory"] == "./var/cache/prod ([yellow]0 B[/])"

    def test_python_section_present(self, kernel, release, output):
        rows = AboutCommand(kernel, release, console=output).build_rows(NOW)
        assert ("[green]Python[/]",) in rows
        assert "Architecture" in section_values(rows, "Python")

    def test_environment_section_omitted_without_vars(self, kernel, release, output):
        rows = AboutCommand(kernel, release, console=output).build_rows(NOW)
        assert ("[green]Environment (.env)[/]",) not in rows

    def test_environment_section(self, kernel, release, output):
        command = AboutCommand(
            kernel,
            release,
            console=output,
            dotenv_vars=["DATABASE_URL", "MAILER_DSN"],
            environ={"DATABASE_URL": "sqlite:///var/app.db"},
        )
        rows = command.build_rows(NOW)
        assert ("[green]Environment (.env)[/]",) in rows
        assert rows[-2:] == [("DATABASE_URL", "sqlite:///var/app.db"), ("MAILER_DSN", "n/a")]

    def test_clock_used_when_now_omitted(self, kernel, release, output):
        command = AboutCommand(kernel, release, clock=lambda: NOW, console=output)
        values = section_values(command.build_rows(), "Framework")
        assert values["End of maintenance"].endswith("in 10 days[/])")


class TestExecute:
    def test_renders_table(self, kernel, release, output):
        code = AboutCommand(kernel, release, console=output).execute(now=NOW)
        text = output.file.getvalue()
        assert code == 0
        assert "Framework" in text
        assert "07/2027 (in 10 days)" in text
        assert "./var/log (100 B)" in text
        assert "Python" in text

    def test_maintained_release_passes(self, kernel, release, output):
        code = AboutCommand(kernel, release, console=output).execute(is_maintained=True, now=NOW)
        assert code == 0
        assert "not maintained" not in output.file.getvalue()

    def test_unmaintained_release_fails(self, kernel, output):
        release = create_mock_release(version="1.3.9", end_of_maintenance="01/2025", end_of_life="07/2025")
        code = AboutCommand(kernel, release, console=output).execute(is_maintained=True, now=NOW)
        text = output.file.getvalue()
        assert code == 1
        assert 'Framework "1.3.9" is not maintained anymore' in text
        assert "Version" not in text

    def test_unmaintained_release_without_flag_still_renders(self, kernel, output):
        release = create_mock_release(version="1.3.9", end_of_maintenance="01/2025", end_of_life="07/2025")
        code = AboutCommand(kernel, release, console=output).execute(now=NOW)
        assert code == 0
        assert "01/2025 Expired" in output.file.getvalue()

    def test_boundary_of_maintenance_window(self, kernel, output):
        release = create_mock_release(end_of_maintenance="07/2027")
        command = AboutCommand(kernel, release, console=output)
        assert command.execute(is_maintained=True, now=datetime(2027, 7, 31, 23, 59, 59)) == 0
        assert command.execute(is_maintained=True, now=datetime(2027, 8, 1, 0, 0, 0)) == 1


class TestMarkupInValues:
    def test_python_version_kept_apart_from_framework_version(self, kernel, release, output):
        rows = AboutCommand(kernel, release, console=output).build_rows(NOW)
        assert section_values(rows, "Framework")["Version"] == "1.4.2"
        assert section_values(rows, "Python")["Version"] != "1.4.2"

    def test_closing_tag_in_environment_renders_literally(self, project_dir, release, output):
        from aboutkit.kernel import Kernel

        kernel = Kernel(environment="[/prod]", project_dir=str(project_dir))
        assert AboutCommand(kernel, release, console=output).execute(now=NOW) == 0
        assert "[/prod]" in output.file.getvalue()

    def test_style_tag_in_charset_renders_literally(self, project_dir, release, output):
        from aboutkit.kernel import Kernel

        kernel = Kernel(charset="[bold]UTF-8", project_dir=str(project_dir))
        AboutCommand(kernel, release, console=output).execute(now=NOW)
        assert "[bold]UTF-8" in output.file.getvalue()

    def test_markup_in_version_and_dotenv_values(self, kernel, output):
        release = create_mock_release(version="1.4.2[beta]")
        command = AboutCommand(
            kernel,
            release,
            console=output,
            dotenv_vars=["APP_SECRET"],
            environ={"APP_SECRET": "[red]not red[/red]"},
        )
        command.execute(now=NOW)
        text = output.file.getvalue()
        assert "1.4.2[beta]" in text
        assert "[red]not red[/red]" in text
