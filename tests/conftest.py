"""Shared fixtures: bilingual lesson modules built under tmp_path."""

from pathlib import Path

import pytest

ROOT_README = """\
# Rust Basics

**Language:** English | [Bahasa Indonesia](README_ID.md)

## Overview

A short introduction to Rust.

## Lessons

- [Fundamentals](01-fundamentals/README.md)
- [Ownership and Borrowing](02-ownership-borrowing/README.md)
"""

ROOT_README_ID = """\
# Dasar Rust

**Language:** [English](README.md) | Bahasa Indonesia

## Ringkasan

Pengantar singkat tentang Rust.

## Pelajaran

- [Dasar-Dasar](01-fundamentals/README_ID.md)
- [Kepemilikan dan Peminjaman](02-ownership-borrowing/README_ID.md)
"""

LESSON_TEMPLATE = """\
# {title}

**Language:** English | [Bahasa Indonesia](README_ID.md)

## Overview

This lesson covers {title}.

## Learning Objectives

- Understand the core ideas
- Apply them in small programs

## Prerequisites

Basic programming knowledge.

### Tools

Install the Rust toolchain first.

```rust
fn main() {{
    println!("Hello");
}}
```

## Best Practices

Prefer immutable bindings.

## Next Steps

Continue with the following lesson.

## Source Attribution

Adapted from The Rust Programming Language book.

---

{navigation}
"""

LESSON_TEMPLATE_ID = """\
# {title}

**Language:** [English](README.md) | Bahasa Indonesia

## Ringkasan

Pelajaran ini membahas {title}.

## Tujuan Pembelajaran

- Memahami ide inti
- Menerapkannya dalam program kecil

## Prasyarat

Pengetahuan dasar pemrograman.

### Alat

Pasang toolchain Rust terlebih dahulu.

```rust
fn main() {{
    println!("Halo");
}}
```

## Praktik Terbaik

Utamakan binding yang immutable.

## Langkah Selanjutnya

Lanjutkan ke pelajaran berikutnya.

## Atribusi Sumber

Diadaptasi dari buku The Rust Programming Language.

---

{navigation}
"""

EXERCISE_README = """\
# Exercise: Variables and Functions

**Language:** English | [Bahasa Indonesia](README_ID.md)

Practice what you learned in [Fundamentals](../../01-fundamentals/README.md).

## Validation Criteria

- The program prints the sum of two numbers
"""

EXERCISE_README_ID = """\
# Latihan: Variabel dan Fungsi

**Language:** [English](README.md) | Bahasa Indonesia

Latih materi dari [Dasar-Dasar](../../01-fundamentals/README_ID.md).

## Kriteria Validasi

- Program mencetak jumlah dua angka
"""


def navigation_block(previous: str | None, next: str | None, home: str,
                     labels: tuple[str, str, str] = ("Previous", "Next", "Module Home")) -> str:
    """Navigation footer lines for a lesson file."""
    lines = []
    if previous is not None:
        lines.append(f"**{labels[0]}**: [Back]({previous})")
    if next is not None:
        lines.append(f"**{labels[1]}**: [Continue]({next})")
    lines.append(f"**{labels[2]}**: [Home]({home})")
    return "\n".join(lines)


def lesson_pair(previous: str | None, next: str | None, title: str) -> dict[str, str]:
    """English and Indonesian README text for one lesson directory."""
    def target(name: str | None, filename: str) -> str | None:
        if name is None:
            return None
        return f"../{filename}" if name == "." else f"../{name}/{filename}"

    return {
        "README.md": LESSON_TEMPLATE.format(
            title=title,
            navigation=navigation_block(
                target(previous, "README.md"), target(next, "README.md"), "../README.md",
            ),
        ),
        "README_ID.md": LESSON_TEMPLATE_ID.format(
            title=title,
            navigation=navigation_block(
                target(previous, "README_ID.md"), target(next, "README_ID.md"), "../README_ID.md",
                labels=("Sebelumnya", "Selanjutnya", "Beranda Modul"),
            ),
        ),
    }


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Write relative path -> content; a trailing '/' creates an empty directory."""
    for relative, content in files.items():
        path = root / relative
        if relative.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def clean_module_files() -> dict[str, str]:
    files = {"README.md": ROOT_README, "README_ID.md": ROOT_README_ID}
    for name, text in lesson_pair(".", "02-ownership-borrowing", "Fundamentals").items():
        files[f"01-fundamentals/{name}"] = text
    for name, text in lesson_pair("01-fundamentals", None, "Ownership and Borrowing").items():
        files[f"02-ownership-borrowing/{name}"] = text
    files.update({
        "exercises/01-variables-functions/README.md": EXERCISE_README,
        "exercises/01-variables-functions/README_ID.md": EXERCISE_README_ID,
        "exercises/01-variables-functions/starter/": "",
        "exercises/01-variables-functions/solution/": "",
    })
    return files


@pytest.fixture
def module_root(tmp_path) -> Path:
    """A module that passes every check."""
    root = tmp_path / "rust-basics"
    root.mkdir()
    return write_tree(root, clean_module_files())


@pytest.fixture
def make_module(tmp_path):
    """Factory building a module from the clean layout plus overrides.

    Overrides map relative paths to new content; None deletes the file.
    """
    def build(overrides: dict[str, str | None] | None = None, name: str = "module") -> Path:
        root = tmp_path / name
        root.mkdir()
        files = clean_module_files()
        for relative, content in (overrides or {}).items():
            if content is None:
                files.pop(relative, None)
            else:
                files[relative] = content
        return write_tree(root, files)

    return build


@pytest.fixture
def lesson_text():
    """Access to the English/Indonesian lesson README builder."""
    return lesson_pair
