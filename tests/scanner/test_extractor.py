"""Tests for codemedic.scanner.extractor."""

from __future__ import annotations

from pathlib import Path

from codemedic.models import FailedProject, Package, ParsedProject
from codemedic.scanner.extractor import XmlNamespace, extract_project
from tests._fixtures.project_builder import MSBUILD_NAMESPACE, csproj


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_extracts_property_group_settings(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "src" / "App" / "App.csproj",
        csproj(
            properties={
                "TargetFramework": "net10.0",
                "OutputType": "Exe",
                "Nullable": "enable",
                "ImplicitUsings": "enable",
                "LangVersion": "13",
                "GenerateDocumentationFile": "true",
            },
            packages=[("Serilog", "4.0.0"), ("Dapper", "2.1.35")],
            project_references=["../Core/Core.csproj"],
        ),
    )

    result = extract_project(path, tmp_path)

    assert isinstance(result, ParsedProject)
    assert result.ok
    record = result.record
    assert record.project_path == str(path)
    assert record.project_name == "App"
    assert record.relative_path == str(Path("src") / "App" / "App.csproj")
    assert record.target_framework == "net10.0"
    assert record.output_type == "Exe"
    assert record.nullable_enabled is True
    assert record.implicit_usings_enabled is True
    assert record.language_version == "13"
    assert record.generates_documentation is True
    assert record.package_dependencies == (
        Package("Serilog", "4.0.0"),
        Package("Dapper", "2.1.35"),
    )
    assert record.project_reference_count == 1
    assert record.parse_errors == ()


def test_missing_output_type_defaults_to_library(tmp_path: Path) -> None:
    path = _write(tmp_path / "Lib.csproj", csproj(properties={"TargetFramework": "net8.0"}))

    record = extract_project(path, tmp_path).record

    assert record.output_type == "Library"


def test_blank_output_type_defaults_to_library(tmp_path: Path) -> None:
    path = _write(tmp_path / "Lib.csproj", csproj(properties={"OutputType": "   "}))

    assert extract_project(path, tmp_path).record.output_type == "Library"


def test_booleans_require_exact_tokens(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "Flags.csproj",
        csproj(
            properties={
                "Nullable": "ENABLE",
                "ImplicitUsings": "disable",
                "GenerateDocumentationFile": "yes",
            }
        ),
    )

    record = extract_project(path, tmp_path).record

    assert record.nullable_enabled is True
    assert record.implicit_usings_enabled is False
    assert record.generates_documentation is False


def test_project_without_property_group_keeps_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path / "Bare.csproj", csproj(packages=[("xunit", "2.9.0")]))

    result = extract_project(path, tmp_path)
    record = result.record

    assert result.ok
    assert record.target_framework is None
    assert record.output_type == "Library"
    assert record.nullable_enabled is False
    assert record.implicit_usings_enabled is False
    assert record.language_version is None
    assert record.generates_documentation is False
    assert record.package_dependencies == (Package("xunit", "2.9.0"),)


def test_only_first_property_group_is_read(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "Multi.csproj",
        """<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFramework>net9.0</TargetFramework>
  </PropertyGroup>
  <PropertyGroup>
    <Nullable>enable</Nullable>
  </PropertyGroup>
</Project>
""",
    )

    record = extract_project(path, tmp_path).record

    assert record.target_framework == "net9.0"
    assert record.nullable_enabled is False


def test_missing_package_attributes_default_to_unknown(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "Refs.csproj",
        """<Project Sdk="Microsoft.NET.Sdk">
  <ItemGroup>
    <PackageReference Include="Newtonsoft.Json" />
    <PackageReference Version="1.0.0" />
  </ItemGroup>
</Project>
""",
    )

    record = extract_project(path, tmp_path).record

    assert record.package_dependencies == (
        Package("Newtonsoft.Json", "unknown"),
        Package("unknown", "1.0.0"),
    )


def test_namespaced_project_file_is_parsed(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "Legacy.csproj",
        csproj(
            properties={"TargetFramework": "net48", "OutputType": "WinExe"},
            packages=[("log4net", "2.0.15")],
            project_references=["../A/A.csproj", "../B/B.csproj"],
            namespace=MSBUILD_NAMESPACE,
        ),
    )

    record = extract_project(path, tmp_path).record

    assert record.target_framework == "net48"
    assert record.output_type == "WinExe"
    assert record.package_dependencies == (Package("log4net", "2.0.15"),)
    assert record.project_reference_count == 2


def test_malformed_file_is_isolated_into_diagnostics(tmp_path: Path) -> None:
    path = _write(tmp_path / "Broken.csproj", "<Project><PropertyGroup>")

    result = extract_project(path, tmp_path)

    assert isinstance(result, FailedProject)
    assert not result.ok
    record = result.record
    assert record.project_name == "Broken"
    assert record.project_path == str(path)
    assert record.relative_path == "Broken.csproj"
    assert len(record.parse_errors) == 1
    assert record.parse_errors[0] == result.error
    assert record.output_type is None
    assert record.package_dependencies == ()


def test_unreadable_file_is_isolated_into_diagnostics(tmp_path: Path) -> None:
    missing = tmp_path / "Gone.csproj"

    result = extract_project(missing, tmp_path)

    assert not result.ok
    assert result.record.project_name == "Gone"
    assert len(result.record.parse_errors) == 1


def test_namespace_helper_qualifies_names() -> None:
    assert XmlNamespace().qualify("Nullable") == "Nullable"
    assert XmlNamespace("urn:x").qualify("Nullable") == "{urn:x}Nullable"


def test_empty_file_reports_parser_error(tmp_path: Path) -> None:
    path = _write(tmp_path / "Empty.csproj", "")

    result = extract_project(path, tmp_path)

    assert isinstance(result, FailedProject)
    assert "no element found" in result.error
    assert result.record.parse_errors == (result.error,)


def test_display_name_combines_name_and_relative_path(tmp_path: Path) -> None:
    path = _write(tmp_path / "src" / "Api.csproj", csproj())

    record = extract_project(path, tmp_path).record

    assert record.display_name == f"Api ({Path('src') / 'Api.csproj'})"
