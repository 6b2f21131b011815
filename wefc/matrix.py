from wefc.elements import AlgebraicElement
from wefc.exceptions import DimensionMismatch, InvalidOperation


class Matrix:
    """Row-major matrix of ``AlgebraicElement`` entries.

    Language matrices mix element kinds, so this only supports
    construction and indexing; arithmetic lives in :mod:`wefc.elements`.
    """

    def __init__(self, nrows, ncols, entries):
        entries = tuple(entries)
        if nrows < 1 or ncols < 1:
            raise DimensionMismatch(
                f"Matrix shape must be positive, got {nrows}x{ncols}"
            )
        if len(entries) != nrows * ncols:
            raise DimensionMismatch(
                f"{len(entries)} entries do not fill a {nrows}x{ncols} matrix"
            )
        for entry in entries:
            if not isinstance(entry, AlgebraicElement):
                raise TypeError(
                    f"Matrix entries must be AlgebraicElement, got {type(entry)}"
                )
        self.nrows = nrows
        self.ncols = ncols
        self.entries = entries

    @classmethod
    def from_rows(cls, rows):
        rows = [list(row) for row in rows]
        if not rows:
            raise DimensionMismatch("Matrix needs at least one row")
        ncols = len(rows[0])
        for row in rows:
            if len(row) != ncols:
                raise DimensionMismatch("Matrix rows must all have the same length")
        return cls(len(rows), ncols, [entry for row in rows for entry in row])

    @property
    def shape(self):
        return (self.nrows, self.ncols)

    def __getitem__(self, index):
        i, j = index
        if not (0 <= i < self.nrows and 0 <= j < self.ncols):
            raise IndexError(
                f"({i}, {j}) outside a {self.nrows}x{self.ncols} matrix"
            )
        return self.entries[i * self.ncols + j]

    def row(self, i):
        return list(self.entries[i * self.ncols : (i + 1) * self.ncols])

    def rows(self):
        return [self.row(i) for i in range(self.nrows)]

    def column(self, j):
        return [self.entries[i * self.ncols + j] for i in range(self.nrows)]

    def column_kind(self, j):
        """Kind shared by every entry of column ``j``."""
        kinds = {entry.kind for entry in self.column(j)}
        if len(kinds) != 1:
            raise InvalidOperation(
                f"Column {j} mixes {sorted(k.value for k in kinds)} entries"
            )
        return kinds.pop()

    def column_kinds(self):
        return [self.column_kind(j) for j in range(self.ncols)]

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.entries == other.entries

    def __repr__(self):
        return f"Matrix({self.nrows}x{self.ncols})"


def check_vector(vector, length, name, kind=None):
    """Raise ``DimensionMismatch`` unless ``vector`` has ``length`` entries."""
    if len(vector) != length:
        raise DimensionMismatch(
            f"{name} has length {len(vector)}, expected {length}"
        )
    if kind is not None:
        for entry in vector:
            if entry.kind is not kind:
                raise InvalidOperation(
                    f"{name} must hold {kind.value} entries, found {entry.kind.value}"
                )

