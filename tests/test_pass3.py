"""
JSON pass3 test from json.org test suite.

Validates parsing of nested object structure with proper
handling of string keys and values.
"""

import jsonstack

# from https://json.org/JSON_checker/test/pass3.json
JSON = r"""
{
    "JSON Test Pattern pass3": {
        "The outermost value": "must be an object or array.",
        "In this test": "It is an object."
    }
}
"""


def test_parse() -> None:
    """
    Validates JSON parsing and round-trip encoding for nested objects.
    """
    res = jsonstack.parse(JSON)
    assert res == {
        "JSON Test Pattern pass3": {
            "The outermost value": "must be an object or array.",
            "In this test": "It is an object.",
        }
    }

    out = jsonstack.stringify(res)
    assert out == (
        '{"JSON Test Pattern pass3":{"The outermost value":'
        '"must be an object or array.","In this test":"It is an object."}}'
    )
    assert res == jsonstack.parse(out)
