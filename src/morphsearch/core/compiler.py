# src/morphsearch/core/compiler.py
"""
Dictionary compiler.

Turns a word list (one synset per line, forms separated by whitespace)
into the keys table and dict table for one word class.

    go goes went gone      → synset 1
    be am is are was were  → synset 2

The synset id of a line is its 1-based line number.
"""

import json
import logging
import os
from pathlib import Path
from typing import Iterable

from morphsearch.core.errors import LexiconIntegrityError, MalformedInputError
from morphsearch.core.lexicon import SynsetTables, WordClass

logger = logging.getLogger(__name__)


def keys_filename(word_class: WordClass) -> str:
    return f"keys.{WordClass(word_class).value}"


def dict_filename(word_class: WordClass) -> str:
    return f"dict.{WordClass(word_class).value}"


def parse_line(line_number: int, line: str) -> list[str]:
    forms = line.split()
    if not forms:
        raise MalformedInputError(line_number, line)
    for form in forms:
        if not form.isalpha():
            raise MalformedInputError(line_number, line, f"bad form {form!r}")
    return forms


def compile_lines(word_class: WordClass, lines: Iterable[str]) -> SynsetTables:
    """Compile word-list lines into validated tables.

    Fails on the first blank or malformed line; nothing is returned for
    a partially read list.
    """
    form_to_ids: dict[str, list[int]] = {}
    id_to_forms: dict[int, list[str]] = {}

    for line_number, line in enumerate(lines, start=1):
        forms = parse_line(line_number, line.rstrip("\r\n"))
        id_to_forms[line_number] = forms
        for form in forms:
            form_to_ids.setdefault(form, []).append(line_number)

    tables = SynsetTables.build(word_class, form_to_ids, id_to_forms)
    logger.debug(
        "compiled %d synsets, %d forms for class %s",
        tables.synset_count, len(tables.form_to_ids), tables.word_class.value,
    )
    return tables


def compile_file(word_class: WordClass, path: str | Path) -> SynsetTables:
    with open(path, encoding="utf-8") as f:
        return compile_lines(word_class, f)


def write_tables(tables: SynsetTables, out_dir: str | Path = ".") -> tuple[Path, Path]:
    """Write `keys.<c>` and `dict.<c>` as JSON objects. Returns both paths.

    Both tables go to temporary files first and are renamed into place
    only once both writes succeed.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    data = tables.to_dict()

    keys_path = out / keys_filename(tables.word_class)
    dict_path = out / dict_filename(tables.word_class)
    pending = [
        (keys_path, out / (keys_path.name + ".tmp"), data["keys"]),
        (dict_path, out / (dict_path.name + ".tmp"), data["dict"]),
    ]
    try:
        for _, tmp_path, table in pending:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(table, f, ensure_ascii=False)
        for path, tmp_path, _ in pending:
            os.replace(tmp_path, path)
    except Exception:
        for _, tmp_path, _ in pending:
            tmp_path.unlink(missing_ok=True)
        raise

    logger.debug("wrote %s and %s", keys_path, dict_path)
    return keys_path, dict_path


def tables_from_json(word_class: WordClass, keys_text: str, dict_text: str) -> SynsetTables:
    try:
        keys = json.loads(keys_text)
        synsets = json.loads(dict_text)
        synsets = {int(sid): forms for sid, forms in synsets.items()}
        return SynsetTables.build(word_class, keys, synsets)
    except LexiconIntegrityError:
        raise
    except (ValueError, TypeError, AttributeError) as e:
        raise LexiconIntegrityError(
            f"[{WordClass(word_class).value}] unreadable tables: {e}"
        ) from e


def read_tables(word_class: WordClass, directory: str | Path = ".") -> SynsetTables:
    """Load the artifacts written by `write_tables`."""
    d = Path(directory)
    keys_text = (d / keys_filename(word_class)).read_text(encoding="utf-8")
    dict_text = (d / dict_filename(word_class)).read_text(encoding="utf-8")
    return tables_from_json(word_class, keys_text, dict_text)
