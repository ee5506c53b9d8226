import json
import logging
import re
from typing import List, Optional, Tuple

from lxml import etree

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

# Namespaced attributes we know how to spell as React props.
NS_PREFIXES = {XLINK_NS: "xlink", XML_NS: "xml"}
PROP_RENAMES = {"class": "className", "for": "htmlFor"}

PURE = "/*#__PURE__*/"
NUMBER_RE = re.compile(r"^-?(0|[1-9]\d*)(\.\d+)?$")
HYPHEN_RE = re.compile(r"-([a-z])")
KEY_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# A value of None renders the key as a bare entry, e.g. a spread.
Prop = Tuple[str, Optional[str]]

SPREAD_PROPS = ("...props", None)


def camelize(name: str) -> str:
    return HYPHEN_RE.sub(lambda m: m.group(1).upper(), name)


def js_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def js_key(name: str) -> str:
    return name if KEY_RE.match(name) else js_string(name)


def is_svg_element(elem) -> bool:
    if not isinstance(elem.tag, str):
        return False
    return etree.QName(elem).namespace in (None, SVG_NS)


def prop_name(attr: str) -> Optional[str]:
    """React prop name for an attribute, or None if it should be dropped."""
    qname = etree.QName(attr)
    if qname.namespace is not None:
        prefix = NS_PREFIXES.get(qname.namespace)
        if prefix is None:
            return None
        local = camelize(qname.localname)
        return prefix + local[0].upper() + local[1:]

    name = qname.localname
    if name.startswith(("aria-", "data-")):
        return name
    return PROP_RENAMES.get(name, camelize(name))


def style_object(style: str) -> str:
    entries = []
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        key, value = (part.strip() for part in declaration.split(":", 1))
        if not key:
            continue
        if not key.startswith("--"):
            if key.startswith("-ms-"):
                key = key[1:]
            key = camelize(key.lower())
        entries.append(f"{js_key(key)}: {js_string(value)}")
    if not entries:
        return "{}"
    return "{ " + ", ".join(entries) + " }"


def prop_value(name: str, value: str) -> str:
    if name == "style":
        return style_object(value)
    if not name.startswith(("aria-", "data-")) and NUMBER_RE.match(value):
        return value
    return js_string(value)


def element_props(elem, root: bool = False) -> List[Prop]:
    props = []
    if root:
        # Namespace declarations are not attributes in lxml; svgr keeps them.
        if elem.nsmap.get(None) == SVG_NS:
            props.append(("xmlns", js_string(SVG_NS)))
        for prefix, uri in sorted((p, u) for p, u in elem.nsmap.items() if p):
            if uri == XLINK_NS:
                props.append((f"xmlns{prefix[0].upper()}{prefix[1:]}", js_string(uri)))

    for attr, value in elem.attrib.items():
        name = prop_name(attr)
        if name is None:
            logging.debug("Dropping foreign attribute %s on <%s>", attr, etree.QName(elem).localname)
            continue
        props.append((js_key(name), prop_value(name, value)))
    return props


def render_props(props: List[Prop], indent: str) -> str:
    if not props:
        return "null"
    body = ",\n".join(
        f"{indent}  {key}" if value is None else f"{indent}  {key}: {value}" for key, value in props
    )
    return "{\n" + body + "\n" + indent + "}"


def create_element(tag: str, props: str, children: List[str]) -> str:
    args = ", ".join([js_string(tag), props, *children])
    return f"{PURE}React.createElement({args})"


def title_element(indent: str, content: str) -> str:
    return create_element("title", render_props([("id", "titleId")], indent), [content])


def title_expression(indent: str, default: Optional[str] = None) -> str:
    expr = f"title ? {title_element(indent, 'title')} : null"
    if default is None:
        return expr
    return f"title === undefined ? {title_element(indent, js_string(default))} : {expr}"


def render_children(elem, indent: str, skip=None) -> List[str]:
    """Render the children of elem; their own children nest one level deeper."""
    children = []
    if elem.text and elem.text.strip():
        children.append(js_string(elem.text.strip()))
    for child in elem:
        if child is not skip and is_svg_element(child):
            children.append(render_element(child, indent))
        if child.tail and child.tail.strip():
            children.append(js_string(child.tail.strip()))
    return children


def render_element(elem, indent: str) -> str:
    props = render_props(element_props(elem), indent)
    children = render_children(elem, indent + "  ")
    return create_element(etree.QName(elem).localname, props, children)


def parse_svg(markup: str):
    parser = etree.XMLParser(remove_comments=True, remove_pis=True, resolve_entities=False)
    root = etree.fromstring(markup.encode("utf-8"), parser)
    if not is_svg_element(root) or etree.QName(root).localname != "svg":
        raise ValueError(f"Expected an <svg> root element, got <{etree.QName(root).localname}>")
    return root


def render_svg(markup: str, indent: str = "  ") -> str:
    """Render SVG markup as a React.createElement expression.

    The root <svg> forwards `svgRef`, is labelled by `titleId`, spreads the caller's
    `props` last, and gets an optional <title> as its first child. An existing <title>
    in the markup becomes the default used when no title prop is passed.
    """
    root = parse_svg(markup)

    existing_title = None
    for child in root:
        if is_svg_element(child) and etree.QName(child).localname == "title":
            existing_title = child
            break

    props = element_props(root, root=True)
    props += [("ref", "svgRef"), (js_string("aria-labelledby"), "titleId"), SPREAD_PROPS]
    merged = render_props(props, indent)

    default = None
    if existing_title is not None:
        default = "".join(existing_title.itertext()).strip()
    children = [title_expression(indent, default)]
    children += render_children(root, indent, skip=existing_title)

    return create_element("svg", merged, children)
