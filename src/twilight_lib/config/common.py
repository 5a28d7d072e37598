import os
import traceback
from configparser import ConfigParser


class Config:
    """Bazowa klasa konfiguracji oparta o pliki INI.

    Klasy potomne tworzą `self.config` (ConfigParser) z własnymi wartościami
    domyślnymi i wywołują `read_from_file()`.

    Args:
        config_file (str): Ścieżka pliku konfiguracyjnego.
        read_only (bool): Gdy True, `save_to_file()` nic nie zapisuje.
    """

    def __init__(self, config_file, read_only=True):
        self._read_only = read_only
        self._config_file_base, self._config_file_extension = os.path.splitext(
            config_file
        )
        self.config = ConfigParser()

    def config_file(self):
        return self._config_file_base + self._config_file_extension

    def read_from_file(self):
        # brak pliku nie jest błędem - zostają wartości domyślne
        self.config.read(self.config_file())
        return self

    def save_to_file(self):
        if not self._read_only:
            with open(self.config_file(), "w") as file:
                self.config.write(file)

    def _dump_all(self):
        if not self._read_only:
            try:
                self.save_to_file()
                print(f"Configuration saved for {self._config_file_base}")
            except OSError as e:
                print(f"Failed to save configuration for {self._config_file_base}: {e}")
                traceback.print_exception(e)

    def __str__(self) -> str:
        out = ""
        for section in self.config.sections():
            out += f"[{section}]\n"
            for key in self.config[section]:
                out += f"{key} = {self.config[section][key]}\n"
            out += "\n"
        return out
