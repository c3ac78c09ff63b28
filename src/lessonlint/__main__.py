"""Allow `python -m lessonlint`."""

from lessonlint.cli import app

app(prog_name="lessonlint")
