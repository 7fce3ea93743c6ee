"""
Line and value patterns for environment files.

Recognizes declaration lines, strips comments, the export prefix and quotes,
and locates $NAME references inside values.
"""

import re
from typing import List, Optional, Tuple


# Line starts with `export `
EXPORT_PATTERN = re.compile(r'^export ')
# Alphanumeric name with leading dollar
REFERENCE_PATTERN = re.compile(r'\$[A-Za-z0-9]+')
# NAME= or export NAME= at start of line
DECLARATION_PATTERN = re.compile(r'^(export )?[A-Za-z0-9]+=')
# Comment marker followed by text, plus leading spaces
COMMENT_PATTERN = re.compile(r' *#.+$')


def is_declaration(line: str) -> bool:
    """Return True if the line looks like a variable declaration."""
    return DECLARATION_PATTERN.match(line) is not None


def strip_comment(line: str) -> str:
    """Remove a trailing comment from a line."""
    return COMMENT_PATTERN.sub('', line, count=1)


def strip_export(line: str) -> str:
    """Remove a leading `export ` prefix."""
    return EXPORT_PATTERN.sub('', line, count=1)


def strip_quotes(line: str) -> str:
    """Delete every double quote; quoting is not interpreted."""
    return line.replace('"', '')


def strip_semicolon(value: str) -> str:
    """Remove a single trailing semicolon."""
    if value.endswith(';'):
        return value[:-1]
    return value


def find_references(value: str) -> List[str]:
    """
    Find $NAME reference tokens in a value.

    Args:
        value: Text to scan

    Returns:
        Tokens (including the dollar) in order of appearance, duplicates kept
    """
    return REFERENCE_PATTERN.findall(value)


def clean_line(line: str) -> str:
    """Apply comment, export and quote stripping in that order."""
    return strip_quotes(strip_export(strip_comment(line)))


def split_declaration(line: str) -> Optional[Tuple[str, str]]:
    """
    Split a cleaned declaration on the first '='.

    Returns:
        (name, value) tuple, or None if the line has no '='
    """
    if '=' not in line:
        return None
    name, value = line.split('=', 1)
    return name, value
