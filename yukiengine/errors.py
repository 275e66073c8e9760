"""Engine error codes and the exceptions that carry them."""

from __future__ import annotations

import inspect
from enum import Enum, auto
from typing import ClassVar, NoReturn, Protocol


class ErrorCode(Enum):
    """Every failure the engine reports, in declaration order."""

    YUKI_APP_CREATED = auto()
    YUKI_LOGGER_CREATE_LOGFILE_ERROR = auto()
    YUKI_INPCTRL_INSERT_CALLBACK_EXISTS = auto()
    YUKI_INPCTRL_REMOVE_CALLBACK_NEXIST = auto()
    YUKI_INPCTRL_INVOKE_UNDEFINED_CALLBACK = auto()
    YUKI_INPCTRL_KEYCODE_INVALID = auto()
    YUKI_THREAD_ATTACHMENT_DUPLICATE_ID = auto()
    YUKI_THREAD_CREATION_FAILED = auto()
    YUKI_THREAD_DETACHMENT_NEXIST = auto()
    YUKI_MUTEX_CREATION_FAILED = auto()
    YUKI_TPOOL_ALREADY_STARTED = auto()
    YUKI_TPOOL_MANAGER_DUPLICATE = auto()
    YUKI_TPOOL_MANAGER_NEXIST = auto()
    YUKI_MUTEX_WAIT_ABANDONED = auto()
    YUKI_MUTEX_WAIT_FUNC_FAILED = auto()
    GLFW_INITIALIZATION_FAILED = auto()
    GLFW_WINDOW_CREATION_FAILED = auto()
    GLAD_LOAD_GLLOADER_FAILED = auto()
    OPENGL_COMPILE_SHADER_ERROR = auto()
    OPENGL_SHADER_PROGRAM_ISNOT_ACTIVED = auto()
    OPENGL_TEXTURE_TYPE_NOT_COMPATIBLE = auto()
    ASSIMP_MODEL_CANT_BE_LOADED = auto()
    SCENE_DUPLICATE_ENTITY_NAME = auto()


_CORE = "[YUKI CORE]"
_GLFW = "[GLFW]"
_OPENGL = "[OPENGL]"
_GLAD = "[GLAD]"

_ORIGIN = {
    ErrorCode.GLFW_INITIALIZATION_FAILED: _GLFW,
    ErrorCode.GLFW_WINDOW_CREATION_FAILED: _GLFW,
    ErrorCode.GLAD_LOAD_GLLOADER_FAILED: _GLAD,
    ErrorCode.OPENGL_COMPILE_SHADER_ERROR: _OPENGL,
    ErrorCode.OPENGL_SHADER_PROGRAM_ISNOT_ACTIVED: _OPENGL,
    ErrorCode.OPENGL_TEXTURE_TYPE_NOT_COMPATIBLE: _OPENGL,
}


class _ErrorSink(Protocol):
    def push_error_message(self, message: str) -> None: ...


class EngineError(RuntimeError):
    """An engine failure tagged with its code and the place that raised it."""

    def __init__(self, code: ErrorCode, file: str, line: int) -> None:
        self.code = code
        self.file = str(file)
        self.line = int(line)
        super().__init__(self.error_message())

    def error_message(self) -> str:
        """The full report text for this error."""
        origin = _ORIGIN.get(self.code, _CORE)
        return (
            "[YUKI ERROR REPORT]\n"
            f"\t[RTE at file: {self.file} - line {self.line}] -> "
            f"{origin} >> {self.code.name} << .Please Check your system\n"
        )

    def push_error_message(self, logger: _ErrorSink) -> None:
        """Send the report to a logger's error channel."""
        logger.push_error_message(self.error_message())


class _CodedError(EngineError):
    CODE: ClassVar[ErrorCode]

    def __init__(self, file: str = "<unknown>", line: int = 0) -> None:
        super().__init__(self.CODE, file, line)


class AppCreatedError(_CodedError):
    CODE = ErrorCode.YUKI_APP_CREATED


class CreateLogFileError(_CodedError):
    CODE = ErrorCode.YUKI_LOGGER_CREATE_LOGFILE_ERROR


class InputCallbackExistsError(_CodedError):
    CODE = ErrorCode.YUKI_INPCTRL_INSERT_CALLBACK_EXISTS


class InputCallbackNotExistError(_CodedError):
    CODE = ErrorCode.YUKI_INPCTRL_REMOVE_CALLBACK_NEXIST


class InputUndefinedCallbackError(_CodedError):
    CODE = ErrorCode.YUKI_INPCTRL_INVOKE_UNDEFINED_CALLBACK


class InputKeyCodeInvalidError(_CodedError):
    CODE = ErrorCode.YUKI_INPCTRL_KEYCODE_INVALID


class ThreadDuplicateIdError(_CodedError):
    CODE = ErrorCode.YUKI_THREAD_ATTACHMENT_DUPLICATE_ID


class ThreadCreationError(_CodedError):
    CODE = ErrorCode.YUKI_THREAD_CREATION_FAILED


class ThreadDetachmentNotExistError(_CodedError):
    CODE = ErrorCode.YUKI_THREAD_DETACHMENT_NEXIST


class MutexCreationError(_CodedError):
    CODE = ErrorCode.YUKI_MUTEX_CREATION_FAILED


class MutexWaitAbandonedError(_CodedError):
    CODE = ErrorCode.YUKI_MUTEX_WAIT_ABANDONED


class MutexWaitFunctionFailedError(_CodedError):
    CODE = ErrorCode.YUKI_MUTEX_WAIT_FUNC_FAILED


class ThreadPoolAlreadyStartedError(_CodedError):
    CODE = ErrorCode.YUKI_TPOOL_ALREADY_STARTED


class ThreadPoolManagerDuplicateKeyError(_CodedError):
    CODE = ErrorCode.YUKI_TPOOL_MANAGER_DUPLICATE


class ThreadPoolManagerMissingKeyError(_CodedError):
    CODE = ErrorCode.YUKI_TPOOL_MANAGER_NEXIST


class GLFWInitError(_CodedError):
    CODE = ErrorCode.GLFW_INITIALIZATION_FAILED


class WindowCreationError(_CodedError):
    CODE = ErrorCode.GLFW_WINDOW_CREATION_FAILED


class GladLoadError(_CodedError):
    CODE = ErrorCode.GLAD_LOAD_GLLOADER_FAILED


class ShaderCompileError(_CodedError):
    CODE = ErrorCode.OPENGL_COMPILE_SHADER_ERROR


class ShaderProgramNotActiveError(_CodedError):
    CODE = ErrorCode.OPENGL_SHADER_PROGRAM_ISNOT_ACTIVED


class TextureTypeNotCompatibleError(_CodedError):
    CODE = ErrorCode.OPENGL_TEXTURE_TYPE_NOT_COMPATIBLE


class ModelLoadError(_CodedError):
    CODE = ErrorCode.ASSIMP_MODEL_CANT_BE_LOADED


class SceneDuplicateEntityNameError(_CodedError):
    CODE = ErrorCode.SCENE_DUPLICATE_ENTITY_NAME


def raise_error(error_class: type[_CodedError]) -> NoReturn:
    """Raise ``error_class`` stamped with the caller's file and line."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is None:
            file, line = "<unknown>", 0
        else:
            file, line = caller.f_code.co_filename, caller.f_lineno
    finally:
        del frame, caller
    raise error_class(file, line)