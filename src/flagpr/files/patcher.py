"""
Apply an EditIntent to a config file on disk.

.json          -> parse, set nested key, write 2-space indented JSON
.yaml / .yml   -> parse, set nested key, write alias-free block YAML
anything else  -> try JSON; if that fails or the root is not an object,
                  rewrite the first `flag: value` text match
                  (case-insensitive) and leave the rest as-is

Known limitation: the text fallback matches the whole flag path literally
and only rewrites the first occurrence. Dotted paths are not resolved there.
"""
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Literal

import yaml

from flagpr.core.errors import DocumentError
from flagpr.core.prompt_parser import format_value
from flagpr.core.types import DocValue, EditIntent
from flagpr.files.mutator import set_nested_value


PatchMode = Literal["json", "yaml", "text"]

YAML_EXTENSIONS = {".yaml", ".yml"}


class NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that always writes repeated objects out in full."""

    def ignore_aliases(self, data: object) -> bool:
        return True


def detect_format(path: Path) -> PatchMode | None:
    """Format implied by the file extension, or None when it must be sniffed."""
    ext = path.suffix.lower()
    if ext == ".json":
        return "json"
    if ext in YAML_EXTENSIONS:
        return "yaml"
    return None


def dump_json(document: DocValue) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False)


def dump_yaml(document: DocValue) -> str:
    return yaml.dump(
        document,
        Dumper=NoAliasDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def replace_flag_text(raw: str, intent: EditIntent) -> str:
    """Rewrite the first `<flag>: <value>` occurrence in unstructured text."""
    pattern = re.compile(rf"{re.escape(intent.flag_path)}\s*:\s*[^\n\r,]+", re.IGNORECASE)
    replacement = f"{intent.flag_path}: {format_value(intent.value)}"
    return pattern.sub(lambda _match: replacement, raw, count=1)


def update_file_flag(file_path: Path | str, intent: EditIntent) -> PatchMode:
    """
    Mutate the file in place and return which path was taken.

    Read, parse and write errors propagate to the caller. No backup is made.
    """
    path = Path(file_path)
    raw = path.read_text(encoding="utf-8")
    mode = detect_format(path)

    if mode == "json":
        output = _patch_document(path, json.loads(raw), intent, dump_json)
    elif mode == "yaml":
        output = _patch_document(path, yaml.safe_load(raw), intent, dump_yaml)
    else:
        try:
            document = json.loads(raw)
        except json.JSONDecodeError:
            print(f"[FlagPR] 📝 {path.name} is not JSON, falling back to text substitution")
            mode = "text"
            output = replace_flag_text(raw, intent)
        else:
            if isinstance(document, dict):
                mode = "json"
                output = _patch_document(path, document, intent, dump_json)
            else:
                print(f"[FlagPR] 📝 {path.name} is JSON but not an object, falling back to text substitution")
                mode = "text"
                output = replace_flag_text(raw, intent)

    path.write_text(output, encoding="utf-8")
    print(f"[FlagPR] ✏️ Updated {intent.flag_path} in {path} ({mode})")
    return mode


def _patch_document(path: Path, document: DocValue, intent: EditIntent, dump) -> str:
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise DocumentError(str(path), f"top-level value is a {type(document).__name__}, expected a mapping")

    set_nested_value(document, intent.flag_path, intent.value)
    return dump(document)
