from pytest import raises


def _row(*values):
    from wefc.elements import AlgebraicElement

    return [AlgebraicElement.wrap(v) for v in values]


def test_from_rows_and_indexing():
    from wefc.betterpairing import G1, G2
    from wefc.elements import ElementKind
    from wefc.matrix import Matrix

    m = Matrix.from_rows(
        [_row(G1.generator(), G2.one()), _row(G1.one(), G2.generator())]
    )
    assert m.shape == (2, 2)
    assert m[0, 0].value == G1.generator()
    assert m[1, 1].value == G2.generator()
    assert m.row(1) == _row(G1.one(), G2.generator())
    assert m.column(0) == _row(G1.generator(), G1.one())
    assert m.column_kinds() == [ElementKind.G1, ElementKind.G2]
    assert m == Matrix(2, 2, m.entries)
    with raises(IndexError):
        m[2, 0]


def test_shape_is_validated():
    from wefc.exceptions import DimensionMismatch
    from wefc.matrix import Matrix

    with raises(DimensionMismatch):
        Matrix.from_rows([])
    with raises(DimensionMismatch):
        Matrix.from_rows([_row(1, 2), _row(3)])
    with raises(DimensionMismatch):
        Matrix(2, 2, _row(1, 2, 3))
    with raises(DimensionMismatch):
        Matrix(0, 1, [])
    with raises(TypeError):
        Matrix(1, 1, [1])


def test_mixed_column_kind():
    from wefc.betterpairing import G1
    from wefc.exceptions import InvalidOperation
    from wefc.matrix import Matrix

    m = Matrix.from_rows([_row(1), _row(G1.one())])
    with raises(InvalidOperation):
        m.column_kind(0)


def test_check_vector():
    from wefc.betterpairing import GT
    from wefc.elements import ElementKind
    from wefc.exceptions import DimensionMismatch, InvalidOperation
    from wefc.matrix import check_vector

    check_vector(_row(GT.one()), 1, "theta", ElementKind.GT)
    with raises(DimensionMismatch):
        check_vector(_row(GT.one()), 2, "theta")
    with raises(InvalidOperation):
        check_vector(_row(1), 1, "theta", ElementKind.GT)
