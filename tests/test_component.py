from __future__ import annotations

import pytest

from component import (
    DEPRECATED_MARKER,
    synthesize,
    synthesize_body,
    synthesize_component,
    synthesize_declaration,
    to_common_form,
    to_module_form,
)
from tests.fixtures import ARROW_RIGHT, BELL
from utils import Format, SourceAsset, pascal_case


def _format_lines(source: str) -> list[str]:
    return [line for line in source.splitlines() if not line.startswith(" ")]


def test_synthesis_is_deterministic() -> None:
    for format in Format:
        first = synthesize_component(ARROW_RIGHT, "ArrowRight", format, deprecated=True)
        second = synthesize_component(ARROW_RIGHT, "ArrowRight", format, deprecated=True)
        assert first == second


def test_module_form() -> None:
    source = synthesize_component(ARROW_RIGHT, "ArrowRight", Format.MODULE)

    assert source.startswith('import * as React from "react";\n\nfunction ArrowRight({\n')
    assert source.endswith("export default ForwardRef;\n")
    assert "require(" not in source
    assert "module.exports" not in source


def test_common_form() -> None:
    source = synthesize_component(ARROW_RIGHT, "ArrowRight", Format.COMMONJS)

    assert source.startswith('const React = require("react");\n\nfunction ArrowRight({\n')
    assert source.endswith("module.exports = ForwardRef;\n")
    assert not any(line.startswith(("import ", "export ")) for line in source.splitlines())


def test_formats_share_the_wrapper_body() -> None:
    esm = synthesize_component(BELL, "Bell", Format.MODULE).splitlines()
    cjs = synthesize_component(BELL, "Bell", Format.COMMONJS).splitlines()

    assert esm[1:-1] == cjs[1:-1]
    assert esm[0] != cjs[0] and esm[-1] != cjs[-1]


def test_wrapper_forwards_ref_and_is_pure() -> None:
    source = synthesize_component(BELL, "Bell", Format.MODULE)

    assert "function Bell({\n  title,\n  titleId,\n  ...props\n}, svgRef) {\n  return " in source
    assert "const ForwardRef = /*#__PURE__*/ React.forwardRef(Bell);\n" in source
    assert "    fillRule: \"evenodd\",\n" in source
    assert "    clipRule: \"evenodd\"\n" in source


def test_deprecation_marker_precedes_declaration() -> None:
    for format in Format:
        lines = synthesize_component(BELL, "BellOld", format, deprecated=True).splitlines()
        at = lines.index(DEPRECATED_MARKER)
        assert lines[at + 1] == "function BellOld({"
        assert lines.count(DEPRECATED_MARKER) == 1


def test_no_deprecation_marker_by_default() -> None:
    for format in Format:
        assert "@deprecated" not in synthesize_component(BELL, "Bell", format)
    assert "@deprecated" not in synthesize_declaration("Bell")


def test_declaration() -> None:
    assert synthesize_declaration("ArrowRight") == (
        "import * as React from 'react';\n"
        "declare const ArrowRight: React.ForwardRefExoticComponent<"
        "React.PropsWithoutRef<React.SVGProps<SVGSVGElement>> & { title?: string, titleId?: string } "
        "& React.RefAttributes<SVGSVGElement>>;\n"
        "export default ArrowRight;\n"
    )


def test_deprecated_declaration() -> None:
    lines = synthesize_declaration("BellOld", deprecated=True).splitlines()

    assert lines[1] == DEPRECATED_MARKER
    assert lines[2].startswith("declare const BellOld: ")


def test_forms_reject_converted_source() -> None:
    body = synthesize_body(BELL, "Bell")
    with pytest.raises(ValueError):
        to_common_form(to_module_form(body))
    with pytest.raises(ValueError):
        to_module_form(to_common_form(body))


def test_format_only_touches_header_and_footer() -> None:
    body = synthesize_body(ARROW_RIGHT, "ArrowRight")
    assert _format_lines(to_module_form(body))[-1] == "export default ForwardRef;"
    assert _format_lines(to_common_form(body))[0] == 'const React = require("react");'


@pytest.mark.parametrize("name", ["React", "ForwardRef"])
def test_reserved_names_rejected(name: str) -> None:
    with pytest.raises(ValueError, match=name):
        synthesize_body(BELL, name)


def test_synthesize_artifact() -> None:
    asset = SourceAsset(filename="bell-old.svg", markup=BELL, identifier="BellOld", deprecated=True)
    artifact = synthesize(asset, Format.COMMONJS)

    assert artifact.identifier == "BellOld"
    assert artifact.format is Format.COMMONJS
    assert DEPRECATED_MARKER in artifact.module_source
    assert DEPRECATED_MARKER in artifact.declaration
    assert artifact.module_source.endswith("module.exports = ForwardRef;\n")


def test_synthesize_accepts_format_value() -> None:
    asset = SourceAsset(filename="bell.svg", markup=BELL, identifier="Bell")
    assert synthesize(asset, "esm") == synthesize(asset, Format.MODULE)


def test_component_named_object_keeps_working() -> None:
    identifier = pascal_case("object")
    source = synthesize_component(BELL, identifier, Format.COMMONJS)

    assert "function Object({" in source
    assert "React.forwardRef(Object);" in source
    # Only the declaration and the forwardRef call may mention the name.
    assert source.count("Object") == 2
    assert '    "aria-labelledby": titleId,\n    ...props\n  }, title ? ' in source
