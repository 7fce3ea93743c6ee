"""
Variable registry for environment files.

Holds every known variable, resolves $NAME references against it, and
re-resolves dependent entries whenever a variable they mention is updated.
"""

import logging
import os
from typing import Dict, Iterable, List, Mapping, Optional

from . import patterns


logger = logging.getLogger(__name__)


class Registry:
    """
    Registry of environment variables with reference resolution.

    Seeded from an environment snapshot so that references to variables that
    already exist can be resolved. Values are stored resolved; the declared
    text of each entry is kept so dependents can be re-resolved when a
    variable they reference changes.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize the registry.

        Args:
            environ: Initial variables; defaults to a snapshot of os.environ
        """
        if environ is None:
            environ = os.environ
        self.vars: Dict[str, str] = dict(environ)
        self._declared: Dict[str, str] = dict(self.vars)
        self.assigned: List[str] = []

    def set(self, key: str, value: str) -> None:
        """
        Add or replace a variable and re-resolve entries that mention it.

        Args:
            key: Variable name
            value: Declared value, possibly containing $NAME references
        """
        previous = self.vars.get(key)
        self.vars[key] = self.evaluate(value)

        # Self-references bind to the value held before this assignment
        declared = value
        if previous is not None:
            declared = declared.replace('$' + key, previous)
        self._declared[key] = declared

        if key not in self.assigned:
            self.assigned.append(key)
        logger.debug(f"Set {key}={self.vars[key]!r}")

        # Find candidates for re-evaluation
        candidates = [name for name in self.vars if self._mentions(name, key)]
        for name in candidates:
            if name == key:
                self.vars[name] = self.evaluate(self.vars[name])
            else:
                resolved = self._evaluate(self._declared[name], skip=name)
                # A token for key may have arrived through another entry's stale value
                self.vars[name] = resolved.replace('$' + key, self.vars[key])
                logger.debug(f"Re-evaluated {name}={self.vars[name]!r} after {key} changed")

    def get(self, key: str) -> Optional[str]:
        """Return the resolved value of a variable, or None if unknown."""
        return self.vars.get(key)

    def evaluate(self, value: str) -> str:
        """
        Resolve $NAME references in a value against known variables.

        Unknown references are left as-is. Substituted text is not scanned
        again, and one trailing semicolon is removed.

        Args:
            value: Text containing references

        Returns:
            Resolved text
        """
        return self._evaluate(value)

    def _evaluate(self, value: str, skip: Optional[str] = None) -> str:
        result = value
        for token in patterns.find_references(value):
            name = token[1:]
            if name == skip:
                continue
            replacement = self.get(name)
            if replacement is not None:
                result = result.replace(token, replacement)
        return patterns.strip_semicolon(result)

    def _mentions(self, name: str, key: str) -> bool:
        if key in self.vars[name]:
            return True
        return name != key and key in self._declared.get(name, '')

    def load(self, lines: Iterable[str]) -> None:
        """
        Load declarations from lines of an environment file.

        Lines that are not declarations are skipped. Each declaration is
        cleaned of comments, the export prefix and quotes, then set in file
        order.

        Args:
            lines: Raw lines, with or without line endings
        """
        for line in lines:
            line = line.rstrip('\r\n')
            if not patterns.is_declaration(line):
                if line.strip():
                    logger.debug(f"Skipping non-declaration line: {line!r}")
                continue

            pair = patterns.split_declaration(patterns.clean_line(line))
            if pair is None:
                continue
            self.set(*pair)
