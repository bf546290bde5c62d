from pydantic import BaseModel


def assert_trees_equal(actual, expected):
    """
    Recursively asserts that two syntax trees (pydantic models) are equal,
    ignoring the 'span' attribute. Reports the path to the first mismatch.
    """
    assert type(actual) == type(expected), f"Node types differ. Actual: {type(actual).__name__}, Expected: {type(expected).__name__}"

    if isinstance(actual, BaseModel):
        for field_name in type(actual).model_fields:
            if field_name in ("span", "file_path"):
                continue

            try:
                assert_trees_equal(getattr(actual, field_name), getattr(expected, field_name))
            except AssertionError as e:
                raise AssertionError(f"Mismatch in field '{field_name}' of {type(actual).__name__}:\n{e}") from e

    elif isinstance(actual, list):
        assert len(actual) == len(expected), f"List lengths differ. Actual: {len(actual)}, Expected: {len(expected)}"
        for i, (act, exp) in enumerate(zip(actual, expected)):
            try:
                assert_trees_equal(act, exp)
            except AssertionError as e:
                raise AssertionError(f"Mismatch at index [{i}] of a list:\n{e}") from e

    else:
        assert actual == expected, f"Primitive values differ. Actual: '{actual}', Expected: '{expected}'"
