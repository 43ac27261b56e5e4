# cappuccina

`cappuccina` evaluates functions built from the classic building blocks of
computability theory: the primitives `zero`, `succ` and `iszero`,
projections, primitive recursion, and bounded and unbounded minimisation
(the μ operator). Values are integers; recursion counts down over a
non-negative first argument.

## Installation

```
pip install .
```

The package has no runtime dependencies. Install the `test` extra to run the
tests with pytest.

## Building blocks

Programs are trees of frozen dataclass nodes from `cappuccina.nodes`:

| Node                  | Meaning                                                      |
|-----------------------|--------------------------------------------------------------|
| `Number`              | a literal integer                                            |
| `Primitive`           | `zero`, `succ` or `iszero`, with an optional argument node   |
| `Projection`          | the i-th argument of the current call, counted from the end (1-based) |
| `RecProjection`       | a value inside a recursion step, counted from the front (see below) |
| `Recursion`           | primitive recursion on the first argument, with a base and a step |
| `Minimization`        | least `z` such that `f(args..., z) == 0`                     |
| `BoundedMinimization` | as above, but searching only `z <= limit`                    |
| `FunctionDef`         | a named user function with its parameter names and body      |
| `Call`                | a call of a built-in or user function by name                |

`add_param(params, name)` and `add_arg(args, expr)` return a new tuple with
the parameter name or argument expression placed at the front.

### Recursion

A `Recursion` node treats its first argument as the recursion variable `y`
and the remaining ones as `x1, ..., xn`:

* when `y == 0`, the base is evaluated with `x1, ..., xn`;
* otherwise the step is evaluated with the arguments
  `[y - 1, h(y - 1, x1, ..., xn), x1, ..., xn]`, which the step reads
  through `RecProjection`: index 1 is `y - 1`, index 2 is the result of the
  previous level, and index 3 onwards are the `x`s.

### Minimisation

`Minimization` and `BoundedMinimization` evaluate their argument expressions,
then call the named function with those values followed by `z = 0, 1, 2, ...`
and return the first `z` for which it yields 0. The bounded form evaluates its
`limit` node and stops after `z == limit`; the unbounded form gives up after
one billion candidates.

## Evaluating

`cappuccina.evaluator.Evaluator` keeps the table of user functions.
`register` adds a `FunctionDef` (other nodes are ignored, and when a name is
registered twice the first definition is kept), `evaluate(node, args)`
computes a node against a sequence of argument values, and
`call(name, arg_nodes, args)` invokes a built-in or user function by name.
When `arg_nodes` is `None`, `args` are passed to the function as they are;
otherwise each argument node is evaluated against `args` first.

```python
from cappuccina.evaluator import Evaluator
from cappuccina.nodes import FunctionDef, Number, Primitive

evaluator = Evaluator()
evaluator.register(
    FunctionDef("main", (), Primitive("succ", Primitive("succ", Number(3))))
)
print(evaluator.call("main", None, []))  # 5
```

The built-in functions reachable by name are `zero`, `succ` and `iszero`. The
primitives are also available as plain functions: `prim_zero`, `prim_succ`,
`prim_iszero`, `prim_proj(args, index)` and `prim_recproj(args, index)`.

## Errors

`EvaluationError` is raised when:

* a called function is neither built in nor registered;
* a projection index lies outside the argument list;
* a `Primitive` has an unknown name, or `succ`/`iszero` lacks its argument;
* a recursion has no arguments or a negative first argument;
* a minimisation finds no value within its limit;
* a node of an unknown kind is evaluated.

## What it does not do

There is no reader for a textual program syntax and no command-line program:
programs are built directly as node objects and evaluated from Python.