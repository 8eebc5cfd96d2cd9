"""Core configuration loader.

Resolves the config path, reads the JSON document and binds it onto a
caller-supplied destination, reporting through the StatusLog port.
"""

from __future__ import annotations

import json
import os
import stat
from typing import Any, NoReturn

from .binding import bind
from .context import BootContext
from .errors import BindError, ConfigError, ErrorKind
from .ports import StatusLog
from .position import locate
from .state_machine import LoaderEvent, LoaderState, LoaderStateMachine

TAG = "config.init"


class ConfigLoader:
    """Loads JSON configuration files into destination objects.

    The caller is expected to aggregate the config objects of every module it
    wants configured into one dataclass; loading an instance of it populates
    each of them.
    """

    def __init__(self, context: BootContext, log: StatusLog):
        self._context = context
        self._log = log
        # a BootContext only exists once the flags have been parsed
        self._state = LoaderStateMachine()
        self._state.transition(LoaderEvent.FLAGS_PARSED)

    @property
    def state(self) -> LoaderState:
        return self._state.state

    def load(self, dest: Any) -> None:
        """Load the file named by -config into ``dest``."""
        self.load_direct(self._context.config_path, dest)

    def load_direct(self, path: str, dest: Any) -> None:
        """Like load, but reads ``path`` instead of the -config flag."""
        try:
            resolved, text = self._read(path)
            self._parse(resolved, text, dest)
        except ConfigError:
            self._state.transition(LoaderEvent.LOAD_FAILED)
            raise

        self._state.transition(LoaderEvent.LOAD_OK)
        self._log.status(TAG, f"Config loaded from '{resolved}'.")

    def _read(self, path: str) -> tuple[str, str]:
        if not path:
            self._fail(ErrorKind.MISSING_PATH, "-config is required")

        try:
            resolved = os.path.abspath(path)
        except (ValueError, OSError) as e:
            self._fail(ErrorKind.UNRESOLVABLE_PATH, f"-config value '{path}' does not resolve", path, e)

        try:
            st = os.stat(resolved)
        except FileNotFoundError:
            # left for open() to report
            pass
        except (OSError, ValueError) as e:
            self._fail(
                ErrorKind.STAT_FAILED,
                f"-config value '{resolved}' does not stat or is a directory",
                resolved,
                e,
            )
        else:
            if stat.S_ISDIR(st.st_mode):
                self._fail(
                    ErrorKind.STAT_FAILED,
                    f"-config value '{resolved}' does not stat or is a directory",
                    resolved,
                )

        try:
            fh = open(resolved, "rb")
        except OSError as e:
            self._fail(ErrorKind.OPEN_FAILED, f"failure opening -config file '{resolved}'", resolved, e)

        with fh:
            try:
                raw = fh.read()
                text = raw.decode("utf-8-sig")
            except (OSError, UnicodeDecodeError) as e:
                self._fail(ErrorKind.READ_FAILED, f"failure reading -config file '{resolved}'", resolved, e)

        self._log.debug(TAG, f"read {len(raw)} bytes from '{resolved}'")
        return resolved, text

    def _parse(self, resolved: str, text: str, dest: Any) -> None:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            pos = locate(text, e.pos)
            print(pos.source_line)
            msg = f"JSON parse error at line {pos.line}, column {pos.column}"
            self._log.error(TAG, msg)
            raise ConfigError(
                ErrorKind.JSON_SYNTAX,
                msg,
                path=resolved,
                line=pos.line,
                column=pos.column,
                source_line=pos.source_line,
            ) from e
        except (ValueError, RecursionError) as e:
            # numbers past the int digit limit, nesting past the recursion limit
            self._fail(ErrorKind.UNMARSHAL, "loading config failed on unmarshal", resolved, e)

        try:
            bind(dest, data)
        except (BindError, TypeError, AttributeError) as e:
            self._fail(ErrorKind.UNMARSHAL, "loading config failed on unmarshal", resolved, e)

    def _fail(
        self,
        kind: ErrorKind,
        msg: str,
        path: str | None = None,
        cause: BaseException | None = None,
    ) -> NoReturn:
        self._log.error(TAG, msg, cause)
        raise ConfigError(kind, msg, path=path) from cause
