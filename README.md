# pseudocode

This is a small compiler for exam-style pseudocode. It reads a pseudocode file and translates it into a C++ program named `output.cpp`. It then runs `g++ output.cpp -o output.exe` to build that program.

## Installation

```
pip install .
```

The build step needs `g++` on your `PATH`.

## Usage

```
pseudocode program.txt
```

If the run succeeds, `output.cpp` and `output.exe` are written to the current directory. The program then prints `Code compiled succesfully: output.exe created.`

Exit status:

- `0`: success.
- `1`: no input file was given, the file could not be read, or the program did not parse.
- `2`: `g++` failed, or `g++` could not be started.

## The language

```
INPUT n
total <- 0
FOR i <- 1 TO n
    IF i > 2 THEN
        total <- total + i
    ELSE
        OUTPUT i
    ENDIF
NEXT
OUTPUT total
```

### Statements

- `INPUT name` reads a value into `name`. The first time a name is read it is declared as a C++ `string`.
- `OUTPUT expr` prints an expression followed by a newline.
- `name <- expr` assigns a value. On the first assignment the variable is declared with a type taken from the last token of the expression:
  - `int` if that token is a number.
  - `string` if that token is a string literal.
  - `auto` otherwise.
- `IF cond THEN ... [ELSE ...] ENDIF` is a conditional.
- `WHILE cond ... ENDWHILE` is a loop that tests its condition first.
- `REPEAT ... UNTIL cond` becomes a C++ `do { } while (!(cond));`.
- `FOR i <- start TO end ... NEXT` counts up by 1 while `i <= end`:
  - `start` must be a number literal.
  - `end` must be an identifier.
  - `NEXT` stands alone. It is not followed by the loop variable.

### Expressions

Expressions are built from these parts:

- numbers
- string literals in double quotes
- identifiers
- indexing, written `a[i]`

Binary operators are parsed with this precedence:

| Operators | Precedence |
|-----------|------------|
| `*` `/` `%` | highest |
| `+` `-` | middle |
| `<` `>` `<=` `>=` | lowest (comparisons) |

Operators are copied into the C++ output as they are written. The pseudocode operators `=` and `<>` are accepted by the parser but are not rewritten. Programs that use them produce C++ that `g++` rejects.

### Variables that hold strings

Variables known to hold strings are converted with `stoi(...)` in three places:

- comparisons
- `%`
- indices and `FOR` bounds

With `+`, the other operand is converted with `to_string(...)`. This lets values read with `INPUT` be used as numbers.

## Library use

```python
from pseudocode.lexer import tokenize
from pseudocode.parser import Parser, ParseError, parse
from pseudocode.nodes import CodeGenContext
from pseudocode.cli import translate, compile_cpp

tokens = tokenize("x <- 5\nOUTPUT x")
program = parse("x <- 5\nOUTPUT x")          # ProgramNode
body = program.generate(CodeGenContext())    # C++ statements only
print(translate("x <- 5\nOUTPUT x"))         # complete C++ program
```

The library is split across four modules:

- `pseudocode.lexer`: `tokenize(code)` returns a list of `Token` objects ending with an `END` token. `look_keyword(word)` maps a word to its `TokenType`.
- `pseudocode.parser`: `Parser(tokens).parse_program()` and `parse(code)` build the syntax tree. Invalid input raises `ParseError`.
- `pseudocode.nodes`: contains the tree node classes, such as `AssignNode`, `IfNode`, `ForNode` and `BinaryExpr`. Each node's `generate(ctx)` returns C++ text. A `CodeGenContext` records which variables have been declared and which of them hold strings.
- `pseudocode.cli`:
  - `translate(code)` wraps the generated statements in a `main()` function with the standard includes.
  - `compile_cpp(source_path, output_path)` runs `g++` and returns `True` on success.
  - `main(argv=None)` is the command described above.

## What it does not do

- `PROCEDURE`, `FUNCTION`, `RETURN`, `TRUE` and `FALSE` are recognised as keywords, but no statement or expression uses them. Subroutines and boolean literals are not supported.
- Parentheses cannot be used for grouping in expressions.
- Output file names are fixed (`output.cpp`, `output.exe`).
- The built program is not run.