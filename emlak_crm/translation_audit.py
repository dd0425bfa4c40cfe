"""
Translation audit for the English and Turkish locale files.

For every *.json file in the English directory it reports keys missing in
either language, Turkish values that still look English and values that are
identical in both languages. The report is informational; the exit code is
always 0.
"""

import argparse
import json
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Short words that legitimately appear untranslated in Turkish text
COMMON_WORDS = {
    "ok", "no", "yes", "id", "url", "pdf", "csv", "api", "ui", "ux",
    "mb", "gb", "kb", "usd", "eur", "try", "tr", "en",
}

REPORT_LIMIT = 10

_TITLE_WORDS = re.compile(r"[A-Z][a-z]+(\s+[A-Z][a-z]+)*")
_ALL_CAPS = re.compile(r"[A-Z]{2,}")
_TURKISH_CHARS = re.compile(r"[çğıöşüÇĞIİÖŞÜ]")


@dataclass
class FileAudit:
    filename: str
    missing_in_tr: list[str] = field(default_factory=list)
    missing_in_en: list[str] = field(default_factory=list)
    untranslated: list[tuple[str, str]] = field(default_factory=list)
    matching_values: list[tuple[str, str]] = field(default_factory=list)
    error: str | None = None

    @property
    def issue_count(self) -> int:
        return (
            len(self.missing_in_tr)
            + len(self.missing_in_en)
            + len(self.untranslated)
            + len(self.matching_values)
        )


def _is_branch(value: Any) -> bool:
    return isinstance(value, dict)


def flatten_keys(data: dict, prefix: str = "") -> list[str]:
    """Dotted paths of every leaf; lists count as leaves"""
    keys = []
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else key
        if _is_branch(value):
            keys.extend(flatten_keys(value, full_key))
        else:
            keys.append(full_key)
    return keys


def get_value_by_path(data: dict, path: str) -> Any:
    value: Any = data
    for key in path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return None
    return value


def is_likely_english(text: Any) -> bool:
    """
    Heuristic: Title Case words or an ALL-CAPS token.

    Short strings, common words, interpolations and anything containing
    Turkish letters are never flagged.
    """
    if not text or not isinstance(text, str):
        return False
    if len(text) <= 2 or text.lower() in COMMON_WORDS:
        return False
    if "{{" in text or "$" in text:
        return False
    if _TURKISH_CHARS.search(text):
        return False
    return bool(_TITLE_WORDS.fullmatch(text) or _ALL_CAPS.fullmatch(text))


def find_untranslated(data: dict, prefix: str = "") -> list[tuple[str, str]]:
    found = []
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else key
        if _is_branch(value):
            found.extend(find_untranslated(value, full_key))
        elif is_likely_english(value):
            found.append((full_key, value))
    return found


def audit_file(en_dir: Path, tr_dir: Path, filename: str) -> FileAudit:
    en_path = en_dir / filename
    tr_path = tr_dir / filename

    if not en_path.exists():
        return FileAudit(filename, error=f"English file not found: {filename}")
    if not tr_path.exists():
        return FileAudit(filename, error=f"Turkish file not found: {filename}")

    try:
        en_data = json.loads(en_path.read_text(encoding="utf-8"))
        tr_data = json.loads(tr_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        return FileAudit(filename, error=f"Failed to parse {filename}: {e}")

    en_keys = flatten_keys(en_data)
    tr_keys = flatten_keys(tr_data)
    tr_key_set = set(tr_keys)
    en_key_set = set(en_keys)

    matching = []
    for key in en_keys:
        if key not in tr_key_set:
            continue
        en_value = get_value_by_path(en_data, key)
        if isinstance(en_value, str) and len(en_value) > 2 and en_value == get_value_by_path(tr_data, key):
            matching.append((key, en_value))

    return FileAudit(
        filename,
        missing_in_tr=[k for k in en_keys if k not in tr_key_set],
        missing_in_en=[k for k in tr_keys if k not in en_key_set],
        untranslated=find_untranslated(tr_data),
        matching_values=matching,
    )


def audit_directories(en_dir: Path, tr_dir: Path) -> list[FileAudit]:
    filenames = sorted(path.name for path in en_dir.glob("*.json"))
    return [audit_file(en_dir, tr_dir, name) for name in filenames]


def _section(lines: list[str], title: str, items: list[str]) -> None:
    if not items:
        return
    lines.append(f"  ⚠️  {title} ({len(items)}):")
    lines.extend(f"     - {item}" for item in items[:REPORT_LIMIT])
    if len(items) > REPORT_LIMIT:
        lines.append(f"     ... and {len(items) - REPORT_LIMIT} more")


def format_report(results: list[FileAudit]) -> str:
    lines = ["🔍 Translation Audit Report", "", "=" * 60]
    total = 0

    for result in results:
        lines.append("")
        if result.error:
            lines.append(f"❌ {result.filename}: {result.error}")
            continue
        if result.issue_count == 0:
            lines.append(f"✅ {result.filename}: No issues found")
            continue

        total += result.issue_count
        lines.append(f"📄 {result.filename}:")
        _section(lines, "Missing in TR", result.missing_in_tr)
        _section(lines, "Missing in EN", result.missing_in_en)
        _section(lines, "Likely English in TR", [f'{k}: "{v}"' for k, v in result.untranslated])
        _section(
            lines,
            "Same value in EN and TR (likely untranslated)",
            [f'{k}: "{v}"' for k, v in result.matching_values],
        )

    lines += ["", "=" * 60, "", f"📊 Total issues found: {total}"]
    return "\n".join(lines)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare English and Turkish translation files.")
    parser.add_argument("--en-dir", type=Path, default=Path("public/locales/en"), help="English locale directory")
    parser.add_argument("--tr-dir", type=Path, default=Path("public/locales/tr"), help="Turkish locale directory")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if not args.en_dir.is_dir():
        print(f"English locale directory not found: {args.en_dir}")
        return 0

    print(format_report(audit_directories(args.en_dir, args.tr_dir)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
