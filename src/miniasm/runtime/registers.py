from typing import Dict, List, Sequence

from miniasm.common.hwconf import REGISTERS
from miniasm.common.errors import UnknownRegister, MalformedOperand
from miniasm.common.program import Operand, Register, Literal


class RegisterBank:
    ''' Fixed set of integer registers, all starting at zero '''
    names: tuple[str, ...]
    values: Dict[str, int]

    def __init__(self, names: Sequence[str] = REGISTERS):
        self.names = tuple(names)
        self.values = dict()
        self.reset()

    def reset(self):
        self.values = {name: 0 for name in self.names}

    def check(self, name: str):
        if name not in self.values:
            raise UnknownRegister(name, self.names)

    def get(self, name: str) -> int:
        self.check(name)
        return self.values[name]

    def set(self, name: str, value: int):
        self.check(name)
        self.values[name] = value

    def snapshot(self) -> List[int]:
        return [self.values[name] for name in self.names]

    def as_dict(self) -> Dict[str, int]:
        return dict(self.values)

    def __str__(self) -> str:
        return ' '.join(f'{name}={self.values[name]}' for name in self.names)


def resolve(operand: Operand, registers: RegisterBank) -> int:
    if isinstance(operand, Register):
        return registers.get(operand.name)

    if isinstance(operand, Literal):
        return operand.value

    raise MalformedOperand(operand, 'not a value')
