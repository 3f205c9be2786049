# dgpkit

Small building blocks for programs that read, write and transform 3D scene
files:

- `dgpkit.tokenizer`: a token reader for VRML/STL style text. Tokens are
  separated by spaces, tabs, newlines, carriage returns and commas, and `#`
  comments run to the end of the line (`Tokenizer`, `StringTokenizer`,
  `FileTokenizer`, `TokenizerError`).
- `dgpkit.bbox`: an axis-aligned bounding box in any dimension (`BBox`).
- `dgpkit.rotation`: axis-angle rotations and 4x4 column-major matrices
  (`rotate`, `vector_to_matrix`, `rotation_to_matrix`, `matrix_to_vector`,
  `multiply_matrices`, `vector_multiply_left`, `cross_product`).
- `dgpkit.registry`: choose a loader or saver by file extension
  (`Loader`, `Saver`, `LoaderRegistry`, `SaverRegistry`, `file_extension`).

The package has no dependencies outside the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Tokenizing

`StringTokenizer` reads from a string, `FileTokenizer` from an open text
stream. The most recently read token is in the `token` attribute.

```python
from dgpkit.tokenizer import StringTokenizer

tkn = StringTokenizer("# a comment\nfacet normal 0, 0, 1\n")
tkn.get()               # True; tkn.token == "facet"
tkn.expecting("normal") # True
tkn.get_vec3f()         # (0.0, 0.0, 1.0)
tkn.get()               # False; the input is exhausted
```

- `get()` reads the next token and returns `False` at the end of the input.
- `require(message)` reads the next token and raises `TokenizerError` with
  `message` when there is none.
- `equals(text)` compares the current token; `expecting(text)` reads the
  next token and compares it.
- `get_bool`, `get_int`, `get_uint`, `get_float`, `get_color`, `get_vec2f`,
  `get_vec3f` and `get_vec4f` read typed values and raise `TokenizerError`
  when the next token does not hold one. Booleans are `t`, `true`, `T`,
  `TRUE`, `f`, `false`, `F` or `FALSE`.
- `getline()` reads the rest of the current line into `token`;
  `nextline()` discards it.
- Iterating over a tokenizer yields the remaining tokens.

Comments are skipped by default; pass `skip_comments=False` to receive each
comment, up to the end of its line, as one token.

## Bounding boxes

```python
from dgpkit.bbox import BBox

box = BBox(3, [0, 0, 0, 2, 1, 0])   # two 3D points, flattened
box.side(0)      # 2.0
box.side()       # longest side
box.center(1)    # 0.5
box.diameter()   # length of the diagonal
```

`BBox(d)` without points is the unit box `[0, 1]^d`. A side of zero length
is widened slightly so the box never has zero volume, and `cube=True` makes
every side as long as the longest one, about the same center. `minimum`,
`maximum` and `dimension` describe the box; `set_min` and `set_max` replace
the first three coordinates of a corner. Indices passed to `center` and
`side` are clamped to the valid range.

## Rotations

Rotations are `(angle_in_degrees, ux, uy, uz)`; matrices are lists of
sixteen floats in column-major order. A zero axis means no rotation.

```python
from dgpkit.rotation import rotate, rotation_to_matrix, matrix_to_vector

rotate((90, 0, 0, 1), (1, 0, 0))   # close to (0, 1, 0)
m = rotation_to_matrix((90, 0, 0, 1))
matrix_to_vector(m)                # close to (90, 0, 0, 1)
```

`multiply_matrices(a, b)` returns `a * b`, and
`vector_multiply_left(angle, u0, u1, u2, r)` composes a rotation after `r`.

## Loader and saver registries

Subclass `Loader` or `Saver`, set its `ext` attribute to an extension
without the dot, and register an instance. The registry picks by the text
after the last dot of the file name; the first one registered for an
extension is kept. `load` and `save` return `False` when the name has no
extension or nothing is registered for it, and otherwise whatever the
chosen loader or saver returns.

```python
from dgpkit.registry import Loader, LoaderRegistry


class TextLoader(Loader):
    ext = "txt"

    def load(self, filename, scene):
        with open(filename) as f:
            scene.append(f.read())
        return True


loaders = LoaderRegistry()
loaders.register(TextLoader())
scene = []
loaders.load("notes.txt", scene)   # True
loaders.load("model.stl", scene)   # False: nothing registered for "stl"
```

## What it does not do

The package provides no loader or saver for any particular file format, no
scene graph type, no mesh data structures and no command-line program.
Registries work with any scene object that your own loaders and savers
understand.