import re
import logging as lg
import tomllib
from pathlib import Path

import miniasm.common.ops as ops
from miniasm.common.hwconf import REGISTERS

REGISTER_NAME = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


class MachineSettings:
    registers: tuple[str, ...]
    trace: bool

    def __init__(self):
        self.registers = REGISTERS
        self.trace = False

    def update(
        self,
        registers: list[str] | tuple[str, ...] | None = None,
        trace: bool | None = None
    ):
        if registers is not None:
            if not isinstance(registers, (list, tuple)):
                raise UserWarning(f'Registers must be a list of names, got {registers!r}')

            for name in registers:
                if not isinstance(name, str) or not REGISTER_NAME.fullmatch(name):
                    raise UserWarning(f'Bad register name {name!r}')

                if name in ops.NAMES:
                    raise UserWarning(f'Register name {name!r} clashes with a mnemonic')

            if len(registers) == 0:
                raise UserWarning('At least one register is required')

            if len(set(registers)) != len(registers):
                raise UserWarning(f'Duplicate register names in {list(registers)}')

            self.registers = tuple(registers)

        if trace is not None:
            if not isinstance(trace, bool):
                raise UserWarning(f'Trace must be true or false, got {trace!r}')

            self.trace = trace

        return self

    @classmethod
    def load(cls, path: str | Path) -> 'MachineSettings':
        if isinstance(path, str):
            path = Path(path)

        lg.debug(f'Loading settings from {path}')
        config = tomllib.loads(path.read_text())
        machine = config.get('machine', dict())

        return cls().update(
            registers=machine.get('registers'),
            trace=machine.get('trace')
        )
