"""
DSP preset text format.

A preset file is a sequence of blocks, one per processing unit:

    eq 1 {
    0.5
    1.0
    }

The header is "<type> {" for named presets and "<type> <enabled> {" for the
current-config file. Every line up to a line that is exactly "}" is one raw
parameter value, whitespace-trimmed, in order. Blank lines between blocks are
ignored; inside a block they are empty values.
"""

import re
from pathlib import Path
from typing import Iterable, List, Union

from dspchain.config import (
    BLOCK_CLOSE,
    BLOCK_OPEN,
    FLAG_DISABLED,
    FLAG_ENABLED,
    HEADER_TOKENS_CURRENT,
    HEADER_TOKENS_NAMED,
)
from .dsp_preset_schema import DSPNode, DSPPreset
from .errors import InvalidPresetError, PresetReadError

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _split_lines(text: str) -> List[str]:
    return _LINE_BREAK.split(text)


def parse_preset(text: str, has_enabled_flag: bool) -> List[DSPNode]:
    """
    Parse preset text into nodes, in file order.

    Args:
        text: Whole file contents
        has_enabled_flag: True for the current-config variant (3-token header)

    Returns:
        List of DSPNode

    Raises:
        InvalidPresetError: Bad header, or a block with no closing brace
    """
    expected = HEADER_TOKENS_CURRENT if has_enabled_flag else HEADER_TOKENS_NAMED
    lines = _split_lines(text)
    nodes = []

    i = 0
    while i < len(lines):
        # Scanning for a header
        line = lines[i].strip()
        i += 1
        if not line:
            continue

        header_line = i
        tokens = line.split()
        if len(tokens) != expected or tokens[-1] != BLOCK_OPEN:
            raise InvalidPresetError(
                f"expected {expected}-token header ending in '{BLOCK_OPEN}', got {line!r}",
                line=header_line,
            )

        node = DSPNode(type=tokens[0])
        if has_enabled_flag and tokens[1] != FLAG_DISABLED:
            node.enabled = True

        # Collecting items
        while i < len(lines) and lines[i] != BLOCK_CLOSE:
            node.items.append(lines[i].strip())
            i += 1

        if i == len(lines):
            raise InvalidPresetError(
                f"missing closing brace for '{node.type}'", line=header_line
            )
        i += 1
        nodes.append(node)

    return nodes


def format_preset(nodes: Iterable[DSPNode], has_enabled_flag: bool) -> str:
    """
    Render nodes back to preset text.

    Item values are written as-is; surrounding whitespace does not survive a
    parse. The flag is written as "1"/"0" for the current-config variant.

    Raises:
        ValueError: A type or value the format cannot hold
    """
    out = []
    for node in nodes:
        if not node.type or len(node.type.split()) != 1 or node.type in (BLOCK_OPEN, BLOCK_CLOSE):
            raise ValueError(f"Unit type not representable in preset text: {node.type!r}")
        if has_enabled_flag:
            flag = FLAG_ENABLED if node.enabled else FLAG_DISABLED
            out.append(f"{node.type} {flag} {BLOCK_OPEN}")
        else:
            out.append(f"{node.type} {BLOCK_OPEN}")
        for value in node.items:
            if value == BLOCK_CLOSE or _LINE_BREAK.search(value):
                raise ValueError(f"Value not representable in preset text: {value!r}")
            out.append(value)
        out.append(BLOCK_CLOSE)

    if not out:
        return ""
    return "\n".join(out) + "\n"


def load_preset_file(name: str, path: Union[str, Path], has_enabled_flag: bool) -> DSPPreset:
    """
    Read and parse one preset file.

    Raises:
        PresetReadError: File exists but cannot be read as UTF-8
        InvalidPresetError: Contents are malformed (source set to path)
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PresetReadError(path, e) from e

    try:
        nodes = parse_preset(text, has_enabled_flag)
    except InvalidPresetError as e:
        raise InvalidPresetError(e.reason, line=e.line, source=path) from e

    return DSPPreset(name=name, nodes=nodes)
