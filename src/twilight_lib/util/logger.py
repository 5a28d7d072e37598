"""Logowanie wiadomości dla czujników robota.

Odpowiedzialność:
- Zapis logów do pliku w osobnym procesie (`MessageLogger`)
- Rotacja plików według okresu (`LoggerPolicyPeriod`) i symlink do najnowszego pliku
- Funkcje `debug`/`info`/`warning`/`error` z fallbackiem na stdout

Eksponuje:
- `LoggerPolicyPeriod`, `LogLevelType`
- `MessageLogger`
- `format_message`, `debug`, `info`, `warning`, `error`
"""

import datetime
import errno
import multiprocessing
import os
import time
from enum import Enum
from pathlib import Path

import psutil
from colorify import C, colorify


class LoggerPolicyPeriod:

    NONE = 1e20
    LAST_1_MINUTE = 60
    LAST_15_MINUTES = LAST_1_MINUTE * 15
    LAST_HOUR = LAST_1_MINUTE * 60
    LAST_24_HOURS = LAST_HOUR * 24


class LogLevelType(Enum):
    debug = 0
    info = 1
    warning = 2
    error = 3


class LoggerReceiver:
    """Odbiornik wiadomości zapisujący je do pliku.

    Działa w procesie potomnym `MessageLogger`. Odbiera pary `[level, message]`
    z pipe'a aż do otrzymania "STOP".

    Args:
        filename (str): Ścieżka bazowa pliku logu.
        clear_file (bool): Czy zaczynać od nowego pliku ze znacznikiem czasu.
        period (float): Co ile sekund tworzyć nowy plik.
        files_count (int): Ile plików zachować.
        create_symlinks (bool): Czy utrzymywać symlink `filename` do najnowszego pliku.
    """

    def __init__(
        self,
        filename,
        clear_file=True,
        period=LoggerPolicyPeriod.NONE,
        files_count=1,
        create_symlinks=False,
    ):
        self.base_filename, self.extension = os.path.splitext(filename)
        self.clear_file = clear_file
        self.last_file_change_time = time.time()
        self.period = period
        self.files_count = files_count
        self.files = []
        self.create_symlinks: bool = create_symlinks

    def _current_filename(self):
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        return f"{self.base_filename}_{timestamp}{self.extension}"

    def _create_new_file(self):
        current_filename = self._current_filename()
        link_name = self.base_filename + self.extension
        self.files.append(current_filename)
        if self.create_symlinks:
            Path(link_name).parent.mkdir(exist_ok=True, parents=True)
            try:
                os.symlink(os.path.basename(current_filename), link_name)
            except OSError as e:
                if e.errno == errno.EEXIST:
                    os.remove(link_name)  # stary symlink
                    os.symlink(os.path.basename(current_filename), link_name)
                else:
                    raise e
        return current_filename

    def _remove_old_files(self):
        # zostawiamy jeden plik więcej niż files_count
        while len(self.files) > self.files_count + 1:
            file_to_delete = self.files.pop(0)
            try:
                os.remove(file_to_delete)
            except FileNotFoundError:
                print(f"Plik {file_to_delete} nie został znaleziony.")
            except PermissionError:
                print(f"Brak uprawnień do usunięcia pliku {file_to_delete}.")

    def run(self, pipe_in):
        if self.clear_file:
            current_filename = self._create_new_file()
        else:
            current_filename = f"{self.base_filename}{self.extension}"
        try:
            while True:
                if time.time() - self.last_file_change_time >= self.period:
                    self.last_file_change_time = time.time()
                    current_filename = self._create_new_file()

                self._remove_old_files()

                data = pipe_in.recv()
                if data == "STOP":
                    break

                logger_file = Path(current_filename)
                logger_file.parent.mkdir(exist_ok=True, parents=True)
                with open(current_filename, "a") as file:
                    level, message = data
                    file.write(format_message(message, level, colorize=False) + "\n")
                    file.flush()

        except KeyboardInterrupt:
            pass


def _run_receiver(pipe_in, filename, clear_file, period, files_count, create_symlinks):
    os.nice(10)
    receiver = LoggerReceiver(
        filename=filename,
        clear_file=clear_file,
        period=period,
        files_count=files_count,
        create_symlinks=create_symlinks,
    )
    receiver.run(pipe_in)


class MessageLogger:
    """Logger wiadomości zapisujący do pliku w osobnym procesie.

    Args:
        filename (str): Ścieżka pliku logu.
        clear_file (bool): Czy zaczynać od nowego pliku.
        period (float): Okres rotacji plików (patrz `LoggerPolicyPeriod`).
        files_count (int): Liczba przechowywanych plików.
        debug (bool): Czy zapisywać wiadomości debug.
        cpu_affinity (list[int] | None): Rdzenie CPU dla procesu zapisującego.
        create_symlinks (bool): Czy utrzymywać symlink `filename` do najnowszego pliku.

    Przykład:
        >>> message_logger = MessageLogger(filename="temp/robot.log", debug=False)
        >>> info("Robot started", message_logger=message_logger)
    """

    def __init__(
        self,
        filename,
        clear_file: bool = True,
        period=LoggerPolicyPeriod.NONE,
        files_count: int = 4,
        debug: bool = True,
        cpu_affinity: list[int] | None = None,
        create_symlinks: bool = True,
    ):
        self.filename = filename
        self.__debug = debug
        self.pipe_out, pipe_in = multiprocessing.Pipe()
        self.process = multiprocessing.Process(
            target=_run_receiver,
            args=(
                pipe_in,
                filename,
                clear_file,
                period,
                files_count,
                create_symlinks,
            ),
            daemon=True,
        )
        self.process.start()
        if cpu_affinity:
            psutil.Process(self.process.pid).cpu_affinity(cpu_affinity)

    def error(self, message):
        self.pipe_out.send([LogLevelType.error, message])

    def warning(self, message):
        self.pipe_out.send([LogLevelType.warning, message])

    def info(self, message):
        self.pipe_out.send([LogLevelType.info, message])

    def debug(self, message):
        if self.__debug:
            self.pipe_out.send([LogLevelType.debug, message])

    def set_debug(self, debug: bool):
        self.__debug = debug

    def close(self):
        """Zatrzymuje proces zapisujący i czeka na jego zakończenie."""
        if self.pipe_out.closed:
            return
        try:
            if self.process.is_alive():
                self.pipe_out.send("STOP")
                self.pipe_out.close()
                self.process.join()
        except BrokenPipeError:
            pass  # pipe już zamknięty

    def __del__(self):
        self.close()


def generate_timestamp():
    now = datetime.datetime.now()
    return now.strftime("%Y-%m-%d %H:%M:%S.%f")


_LEVEL_COLORS = {
    LogLevelType.debug: C.blue,
    LogLevelType.info: C.blue,
    LogLevelType.warning: C.orange,
    LogLevelType.error: C.red,
}


def format_message(
    message: str, level: LogLevelType = LogLevelType.info, colorize: bool = True
):
    if isinstance(level, LogLevelType):
        name, color = level.name, _LEVEL_COLORS[level]
    else:
        name, color = "NONE", C.red
    label = colorify(name, color) if colorize else name
    return f"{generate_timestamp()} [{label}] {message}"


def debug(message: str, message_logger: MessageLogger = None, colorize: bool = True):
    if message_logger is not None:
        message_logger.debug(message)
    else:
        print(format_message(message, LogLevelType.debug, colorize))


def info(message: str, message_logger: MessageLogger = None, colorize: bool = True):
    if message_logger is not None:
        message_logger.info(str(message))
    else:
        print(format_message(message, LogLevelType.info, colorize))


def warning(message: str, message_logger: MessageLogger = None, colorize: bool = True):
    if message_logger is not None:
        message_logger.warning(message)
    else:
        print(format_message(message, LogLevelType.warning, colorize))


def error(message: str, message_logger: MessageLogger = None, colorize: bool = True):
    if message_logger is not None:
        message_logger.error(message)
    else:
        print(format_message(message, LogLevelType.error, colorize))
