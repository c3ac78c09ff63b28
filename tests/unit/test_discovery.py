"""Unit tests for lesson, pair and exercise discovery."""

from lessonlint.config import LessonLintConfig
from lessonlint.discovery import (
    discover_bilingual_pairs,
    discover_exercises,
    discover_lesson_files,
    discover_lessons,
    lesson_sort_key,
)


class TestLessonDiscovery:
    """Test lesson sequence discovery."""

    def test_lessons_in_sequence_order(self, module_root):
        lessons = discover_lessons(module_root, LessonLintConfig())

        assert [lesson.name for lesson in lessons] == ["01-fundamentals", "02-ownership-borrowing"]
        assert [lesson.position for lesson in lessons] == ["first", "last"]
        assert lessons[0].is_first and not lessons[0].is_last

    def test_auxiliary_and_misnamed_dirs_are_not_lessons(self, module_root):
        (module_root / "Draft Lesson").mkdir()
        (module_root / "node_modules").mkdir()

        names = [lesson.name for lesson in discover_lessons(module_root, LessonLintConfig())]
        assert names == ["01-fundamentals", "02-ownership-borrowing"]

    def test_numeric_prefix_ordering(self):
        names = ["10-advanced", "02-ownership", "01-basics", "intro"]
        assert sorted(names, key=lesson_sort_key) == ["01-basics", "02-ownership", "10-advanced", "intro"]

    def test_single_lesson_is_only(self, tmp_path):
        (tmp_path / "01-only").mkdir()
        lessons = discover_lessons(tmp_path, LessonLintConfig())
        assert lessons[0].position == "only"

    def test_lesson_files_per_language(self, module_root):
        files = discover_lesson_files(module_root, LessonLintConfig())

        assert [(f.lesson, f.language) for f in files] == [
            ("01-fundamentals", "en"),
            ("01-fundamentals", "id"),
            ("02-ownership-borrowing", "en"),
            ("02-ownership-borrowing", "id"),
        ]


class TestPairDiscovery:
    """Test bilingual pair discovery."""

    def test_pairs_include_root_and_exercises(self, module_root):
        pairs = discover_bilingual_pairs(module_root, LessonLintConfig())

        assert [pair.directory for pair in pairs] == [
            ".",
            "01-fundamentals",
            "02-ownership-borrowing",
            "exercises/01-variables-functions",
        ]
        assert pairs[0].primary_path.name == "README.md"
        assert pairs[0].secondary_path.name == "README_ID.md"

    def test_half_pairs_are_not_pairs(self, make_module):
        root = make_module({"01-fundamentals/README_ID.md": None})
        directories = [pair.directory for pair in discover_bilingual_pairs(root, LessonLintConfig())]
        assert "01-fundamentals" not in directories


class TestExerciseDiscovery:
    """Test exercise discovery."""

    def test_exercises(self, module_root):
        exercises = discover_exercises(module_root, LessonLintConfig())

        assert [exercise.name for exercise in exercises] == ["01-variables-functions"]
        assert [f.language for f in exercises[0].files] == ["en", "id"]

    def test_no_exercises_directory(self, tmp_path):
        assert discover_exercises(tmp_path, LessonLintConfig()) == []
