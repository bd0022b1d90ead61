# symtab

symtab is a symbol table made of nested scopes. Each scope is a hash table that handles collisions by separate chaining. The package also has two commands:

- `symtab` runs a script written in a small command language against a table.
- `symtab-report` compares how often the three built-in hash functions collide.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Running commands from a file

```
symtab INPUT OUTPUT [sdbm|djb2|fnv]
```

The hash function defaults to `sdbm`. If you give a name other than those three, the command prints `Invalid hash function` and exits with status 1.

The first line of `INPUT` must start with a positive integer. That number is the bucket count for every scope. Each later line holds one command, and blank lines are skipped:

| Command | Meaning |
|---|---|
| `I name type...` | insert a symbol into the current scope |
| `L name` | look a name up, starting in the current scope and moving outward |
| `D name` | delete a name from the current scope |
| `S` | enter a new scope; scope ids count up from 1 |
| `E` | exit the current scope |
| `P A` / `P C` | print all scopes (innermost first, each one indented one tab deeper), or only the current one |
| `Q` | remove every open scope |

Each command is echoed to `OUTPUT` as `Cmd N: ...`, followed by its result, for example:

- `Inserted in ScopeTable# 1 at position 3, 1`
- `'x' found in ScopeTable# 1 at position 3, 1`
- `'x' not found in any of the ScopeTables`

Positions are 1-based: the bucket number, then the place in that bucket's chain.

If a command has the wrong number of arguments, the output shows `Number of parameters mismatch for the command ...`. For `S`, `E` and `Q`, that message always names the command `S`.

Once every scope has been closed with `E` or `Q`, the only commands that still work are `S`, `E`, `Q` and `P A`, and they do nothing. The commands `I`, `D` and `P C` raise `RuntimeError`. `L` reports the name as not found.

When the script ends, the command writes `Total collisions: N` and `Collision ratio: R` to `./textFolder/temp.txt`. The ratio is collisions divided by bucket count. A collision is counted each time a symbol is inserted into a bucket that already holds at least one symbol.

## Comparing hash functions

```
symtab-report
```

This command runs the `symtab` driver in-process on `./textFolder/sample_input.txt` once for each of `sdbm`, `djb2` and `fnv`. Each run writes its log to `./textFolder/temp_<name>.txt`, and the command reads that run's collision summary back from `./textFolder/temp.txt`. It then writes a fixed-width table to `./textFolder/report.txt`, with the columns Hash Function, Total Collisions and Collision Ratio.

If a run fails, the command reports the failure on standard error and leaves that hash function out of the table.

## How types are printed

The type text decides how a symbol is printed (`SymbolInfo.render`):

| Type text | Printed as |
|---|---|
| `FUNCTION INT INT FLOAT` | `<foo,FUNCTION,INT<==(INT,FLOAT)>` |
| `STRUCT INT n BOOL b` (or `UNION ...`) | `<car,STRUCT,{(INT,n),(BOOL,b)}>` |
| anything else | `<name,TYPE>` |

## Library use

```python
import io
from symtab.table import SymbolTable
from symtab.hashing import get_hash_function

out = io.StringIO()
with SymbolTable(7, 1, out, get_hash_function("djb2")) as table:
    table.insert("x", "INT")
    table.enter_scope()
    table.lookup("x")
    table.print_all_scopes()
    print(table.collision_count, table.collision_ratio())
print(out.getvalue())
```

The modules are:

- `symtab.hashing`: `sdbm_hash`, `djb2_hash` and `fnv_hash`, each taking `(text, num_buckets)` and returning a bucket index. `get_hash_function(name)` looks one up by name and raises `ValueError` for an unknown name.
- `symtab.symbol`: `SymbolInfo`.
- `symtab.scope`: `ScopeTable`, a single scope with `insert`, `lookup`, `delete` and `write`. It supports `len()`, iteration and `in`.
- `symtab.table`: `SymbolTable`, the stack of scopes. It has `enter_scope`, `exit_scope`, `insert`, `remove`, `lookup`, `print_current_scope`, `print_all_scopes`, `collision_ratio`, `reset_collision_count` and `close`, and it can be used as a context manager.
- `symtab.cli`: `run_commands(lines, table, out)` and `main(argv=None)`.
- `symtab.report`: `HashReport`, `parse_report(path, hash_name)`, `write_report(reports, path)` and `main(argv=None)`.

### The lexer's table

`symtab.lexical` provides a second table, meant for a lexical analyser:

- Scope ids are dotted strings: `1`, `1.1`, `1.1.1`, ...
- Bucket indices come from `sdbm_hash32`, a full 32-bit SDBM hash, taken modulo the bucket count.
- Symbols print as `< name : type >`.
- Inserting a name that already exists writes `... already exists in ScopeTable# ... at position i, j`. Here `i` and `j` are 0-based.
- `write` lists only the non-empty buckets.
- Scope creation, scope removal and failed lookups are announced on standard output.

The classes are `LexSymbolInfo`, `LexScopeTable` and `LexSymbolTable`.

## What is not included

- The package has no lexical analyser, only the symbol table that one would fill.
- There is no command that drives `symtab.lexical`.
- Tables live only in memory. The only files written are the logs and summaries described above.