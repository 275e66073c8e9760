import inspect

import pytest

from yukiengine.errors import (
    AppCreatedError,
    CreateLogFileError,
    EngineError,
    ErrorCode,
    GLFWInitError,
    GladLoadError,
    ModelLoadError,
    SceneDuplicateEntityNameError,
    ShaderCompileError,
    ThreadPoolManagerMissingKeyError,
    raise_error,
)


class _Sink:
    def __init__(self):
        self.messages = []

    def push_error_message(self, message):
        self.messages.append(message)


def test_error_codes_keep_declaration_order():
    codes = list(ErrorCode)
    assert codes[0] is ErrorCode.YUKI_APP_CREATED
    assert codes[-1] is ErrorCode.SCENE_DUPLICATE_ENTITY_NAME
    assert len(codes) == 23
    for code in codes:
        err = EngineError(code, "f", 1)
        assert err.code is code
        assert f" >> {code.name} << " in err.error_message()


def test_core_error_message_format():
    err = AppCreatedError("main.cpp", 42)
    assert err.error_message() == (
        "[YUKI ERROR REPORT]\n\t[RTE at file: main.cpp - line 42] -> "
        "[YUKI CORE] >> YUKI_APP_CREATED << .Please Check your system\n"
    )


@pytest.mark.parametrize(
    "cls, origin",
    [
        (GLFWInitError, "[GLFW]"),
        (GladLoadError, "[GLAD]"),
        (ShaderCompileError, "[OPENGL]"),
        (ModelLoadError, "[YUKI CORE]"),
        (ThreadPoolManagerMissingKeyError, "[YUKI CORE]"),
    ],
)
def test_origin_tag_in_message(cls, origin):
    message = cls("f", 1).error_message()
    assert f"{origin} >> {cls.CODE.name} <<" in message


def test_subclass_carries_its_code_and_location():
    err = SceneDuplicateEntityNameError("scene.py", 7)
    assert err.code is ErrorCode.SCENE_DUPLICATE_ENTITY_NAME
    assert (err.file, err.line) == ("scene.py", 7)
    assert isinstance(err, EngineError)
    assert str(err) == err.error_message()


def test_base_error_accepts_any_code():
    err = EngineError(ErrorCode.YUKI_MUTEX_WAIT_ABANDONED, "x", 3)
    assert "YUKI_MUTEX_WAIT_ABANDONED" in err.error_message()


def test_push_error_message_goes_to_logger():
    sink = _Sink()
    err = CreateLogFileError("log.py", 10)
    err.push_error_message(sink)
    assert sink.messages == [err.error_message()]


def test_raise_error_records_caller_location():
    expected_line = inspect.currentframe().f_lineno + 2
    with pytest.raises(AppCreatedError) as info:
        raise_error(AppCreatedError)
    assert info.value.file == __file__
    assert info.value.line == expected_line


def test_raised_errors_are_runtime_errors():
    with pytest.raises(RuntimeError):
        raise_error(GLFWInitError)