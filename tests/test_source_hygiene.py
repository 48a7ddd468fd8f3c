from __future__ import annotations

import ast
from pathlib import Path
import unittest


REPO_ROOT = Path(__file__).resolve().parent.parent
TARGET_DIRS = ("src/sexp2c",)
VISITOR_MODULES = {"traverser.py", "transformer.py"}


def _iter_python_files() -> list[Path]:
    files: list[Path] = []
    for rel in TARGET_DIRS:
        root = REPO_ROOT / rel
        files.extend(sorted(root.rglob("*.py")))
    return files


def _is_print_call(node: ast.AST) -> bool:
    return isinstance(node, ast.Call) and isinstance(node.func, ast.Name) and node.func.id == "print"


class SourceHygieneTests(unittest.TestCase):
    def test_package_sources_are_found(self) -> None:
        names = {path.name for path in _iter_python_files()}
        self.assertTrue(VISITOR_MODULES <= names, msg=f"missing modules in {sorted(names)}")

    def test_library_code_never_prints(self) -> None:
        violations: list[str] = []

        for path in _iter_python_files():
            tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
            for node in ast.walk(tree):
                if _is_print_call(node):
                    rel = path.relative_to(REPO_ROOT)
                    violations.append(f"{rel}:{node.lineno}")

        self.assertEqual([], violations, msg="print() calls found:\n" + "\n".join(violations))

    def test_visitor_callbacks_never_assign_onto_visited_nodes(self) -> None:
        violations: list[str] = []

        for path in _iter_python_files():
            if path.name not in VISITOR_MODULES:
                continue
            tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
            for func in ast.walk(tree):
                if not isinstance(func, ast.FunctionDef):
                    continue
                params = {arg.arg for arg in func.args.args} & {"node", "parent", "program", "root"}
                for inner in ast.walk(func):
                    targets: list[ast.expr] = []
                    if isinstance(inner, ast.Assign):
                        targets = list(inner.targets)
                    elif isinstance(inner, (ast.AugAssign, ast.AnnAssign)):
                        targets = [inner.target]
                    for target in targets:
                        if (
                            isinstance(target, ast.Attribute)
                            and isinstance(target.value, ast.Name)
                            and target.value.id in params
                        ):
                            rel = path.relative_to(REPO_ROOT)
                            violations.append(f"{rel}:{inner.lineno}")

        self.assertEqual(
            [],
            violations,
            msg="Attribute assignment onto AST nodes found:\n" + "\n".join(violations),
        )


if __name__ == "__main__":
    unittest.main()
