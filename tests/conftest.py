from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


TEMPLATE_FILES = {
    ".git/HEAD": "ref: refs/heads/main\n",
    "README.md": "# App\n\nStart from app.model and app.equation.\n",
    "CMakeLists.txt": "project(App)\ninclude_directories(include)\n",
    "include/app/model.hpp": '#include "app/equation.hpp"\n\nclass AppModel {};\n',
    "include/app/equation.hpp": "struct AppEquation {};\n",
    "src/main.cpp": '#include "app/model.hpp"\n\nint main() { AppModel m; return 0; }\n',
    "tests/test_app.cpp": "class AppEquationTest {};\n",
    "tests/test_app_model.cpp": "// AppModel\n",
    "tests/CMakeLists.txt": "add_executable(test_app test_app.cpp)\n",
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    for relative_path, content in files.items():
        destination = root / relative_path
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")
    return root


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    """A miniature copy of the AppFXMpp template."""

    return write_tree(tmp_path / "template", TEMPLATE_FILES)
