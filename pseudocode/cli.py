"""Command-line entry point: translate pseudocode to C++ and compile it."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from pseudocode.nodes import CodeGenContext
from pseudocode.parser import ParseError, parse

_PRELUDE = "#include <bits/stdc++.h>\nusing namespace std;\n\nint main() {\n"
_OUTPUT_SOURCE = "output.cpp"
_OUTPUT_BINARY = "output.exe"


def translate(code: str) -> str:
    """Return a complete C++ program for the pseudocode ``code``."""
    program = parse(code)
    return f"{_PRELUDE}{program.generate(CodeGenContext())}}}\n"


def compile_cpp(source_path: str | Path, output_path: str | Path) -> bool:
    """Compile ``source_path`` with g++; True if compilation succeeded."""
    try:
        result = subprocess.run(
            ["g++", str(source_path), "-o", str(output_path)], check=False
        )
    except OSError:
        return False
    return result.returncode == 0


def main(argv: list[str] | None = None) -> int:
    """Translate the given file to output.cpp and compile it to output.exe."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: pseudocode <input_file>", file=sys.stderr)
        return 1

    path = args[0]
    try:
        code = Path(path).read_text(encoding="utf-8")
    except OSError:
        print(f"Error: Could not open file {path}", file=sys.stderr)
        return 1

    try:
        cpp = translate(code)
    except ParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    Path(_OUTPUT_SOURCE).write_text(cpp, encoding="utf-8")

    if not compile_cpp(_OUTPUT_SOURCE, _OUTPUT_BINARY):
        print("Error: C++ code compilation failed", file=sys.stderr)
        return 2
    print(f"Code compiled succesfully: {_OUTPUT_BINARY} created.")
    return 0


if __name__ == "__main__":
    sys.exit(main())