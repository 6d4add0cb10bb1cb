from students_api.error_handlers import translate_validation_error
from students_api.errors import (
    DecodeError,
    EmptyBodyError,
    InvalidIdError,
    NotFoundError,
    StorageError,
    ValidationError,
)


def test_missing_body_is_empty_body():
    err = translate_validation_error([{"type": "missing", "loc": ("body",), "msg": "Field required"}])

    assert isinstance(err, EmptyBodyError)
    assert err.http_status == 400


def test_json_invalid_is_decode_error_with_parser_detail():
    err = translate_validation_error([
        {"type": "json_invalid", "loc": ("body", 9), "msg": "JSON decode error", "ctx": {"error": "Expecting value"}},
    ])

    assert isinstance(err, DecodeError)
    assert err.message == "decode error: Expecting value"


def test_json_invalid_on_blank_body_is_empty_body():
    error = {"type": "json_invalid", "loc": ("body", 4), "msg": "JSON decode error", "ctx": {"error": "Expecting value"}}

    assert isinstance(translate_validation_error([error], "   \n"), EmptyBodyError)
    assert isinstance(translate_validation_error([error], b"\t"), EmptyBodyError)
    assert isinstance(translate_validation_error([error], '{"name": '), DecodeError)


def test_out_of_range_path_id_is_invalid_id():
    err = translate_validation_error([
        {"type": "less_than_equal", "loc": ("path", "student_id"), "msg": "too big", "input": "99999999999999999999"},
    ])

    assert isinstance(err, InvalidIdError)
    assert err.message == "invalid student id: '99999999999999999999'"


def test_decoding_wins_over_path_errors():
    err = translate_validation_error([
        {"type": "int_parsing", "loc": ("path", "student_id"), "msg": "bad", "input": "x"},
        {"type": "missing", "loc": ("body",), "msg": "Field required"},
    ])

    assert isinstance(err, EmptyBodyError)


def test_field_errors_keep_order_and_collapse_duplicates():
    err = translate_validation_error([
        {"type": "missing", "loc": ("body", "name"), "msg": "Field required"},
        {"type": "string_type", "loc": ("body", "email"), "msg": "bad"},
        {"type": "string_too_long", "loc": ("body", "email"), "msg": "bad"},
        {"type": "required", "loc": ("body", "age"), "msg": "field is required"},
    ])

    assert isinstance(err, ValidationError)
    assert err.messages == [
        "field Name is required",
        "field Email is invalid",
        "field Age is required",
    ]
    assert err.message == "field Name is required, field Email is invalid, field Age is required"


def test_path_error_is_invalid_id():
    err = translate_validation_error([
        {"type": "int_parsing", "loc": ("path", "student_id"), "msg": "bad", "input": "abc"},
    ])

    assert isinstance(err, InvalidIdError)
    assert err.http_status == 400
    assert err.to_response() == {"Status": "Error", "Error": "invalid student id: 'abc'"}


def test_storage_errors_are_server_errors():
    assert StorageError("disk full").http_status == 500
    assert NotFoundError("student not found with id 1").http_status == 500
    assert isinstance(NotFoundError("x"), StorageError)
