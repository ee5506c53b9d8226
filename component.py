"""Turn a source SVG into the text of a React wrapper component and its type declaration."""

from svg import PURE, render_svg
from utils import Format, GeneratedArtifact, SourceAsset

DEPRECATED_MARKER = "/** @deprecated */"

REACT_IMPORT = 'import * as React from "react";'
REACT_REQUIRE = 'const React = require("react");'
MODULE_EXPORT = "export default ForwardRef;"
COMMON_EXPORT = "module.exports = ForwardRef;"

# Names bound at the top level of every generated file.
RESERVED_NAMES = {"React", "ForwardRef"}

# Only the header and footer differ between formats; the body must carry neither.
FORMAT_LINE_PREFIXES = ("import ", "export ", "const React = require(", "module.exports")


def _check_neutral(body: str):
    for line in body.splitlines():
        if line.startswith(FORMAT_LINE_PREFIXES):
            raise ValueError(f"Wrapper body already contains module syntax: {line!r}")


def to_module_form(body: str) -> str:
    _check_neutral(body)
    return f"{REACT_IMPORT}\n\n{body}{MODULE_EXPORT}\n"


def to_common_form(body: str) -> str:
    _check_neutral(body)
    return f"{REACT_REQUIRE}\n\n{body}{COMMON_EXPORT}\n"


FORMS = {
    Format.MODULE: to_module_form,
    Format.COMMONJS: to_common_form,
}


def synthesize_body(markup: str, identifier: str, deprecated: bool = False) -> str:
    if identifier in RESERVED_NAMES:
        raise ValueError(f"{identifier!r} clashes with a name used by the generated module")

    lines = []
    if deprecated:
        lines.append(DEPRECATED_MARKER)
    lines += [
        f"function {identifier}({{",
        "  title,",
        "  titleId,",
        "  ...props",
        "}, svgRef) {",
        f"  return {render_svg(markup, indent='  ')};",
        "}",
        "",
        f"const ForwardRef = {PURE} React.forwardRef({identifier});",
    ]
    return "\n".join(lines) + "\n"


def synthesize_component(
    markup: str, identifier: str, format: Format, deprecated: bool = False
) -> str:
    return FORMS[Format(format)](synthesize_body(markup, identifier, deprecated))


def synthesize_declaration(identifier: str, deprecated: bool = False) -> str:
    types = ["import * as React from 'react';"]
    if deprecated:
        types.append(DEPRECATED_MARKER)
    types.append(
        f"declare const {identifier}: React.ForwardRefExoticComponent<"
        "React.PropsWithoutRef<React.SVGProps<SVGSVGElement>> & { title?: string, titleId?: string } "
        "& React.RefAttributes<SVGSVGElement>>;"
    )
    types.append(f"export default {identifier};")
    return "\n".join(types) + "\n"


def synthesize(asset: SourceAsset, format: Format) -> GeneratedArtifact:
    return GeneratedArtifact(
        identifier=asset.identifier,
        format=Format(format),
        module_source=synthesize_component(
            asset.markup, asset.identifier, format, asset.deprecated
        ),
        declaration=synthesize_declaration(asset.identifier, asset.deprecated),
    )
