from dataclasses import dataclass, field
from typing import Dict, List, TypeAlias

import miniasm.common.ops as ops
from miniasm.common.hwconf import REGISTERS


@dataclass(frozen=True)
class Register:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Literal:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class LabelRef:
    name: str

    def __str__(self) -> str:
        return self.name


Operand: TypeAlias = Register | Literal | LabelRef


@dataclass(frozen=True)
class Instruction:
    op: int
    operands: tuple[Operand, ...] = ()

    @property
    def mnemonic(self) -> str:
        return ops.MNEMONICS[self.op]

    def target(self) -> str:
        ''' Label name of a jump '''
        (ref,) = self.operands
        assert isinstance(ref, LabelRef)
        return ref.name

    def __str__(self) -> str:
        if not self.operands:
            return self.mnemonic

        return f'{self.mnemonic} {", ".join(str(o) for o in self.operands)}'


@dataclass
class Program:
    instructions: List[Instruction]
    labels: Dict[str, int]
    registers: tuple[str, ...] = field(default=REGISTERS)

    def __len__(self) -> int:
        return len(self.instructions)

    def unresolved_labels(self) -> List[str]:
        missing = []

        for instr in self.instructions:
            if instr.op in ops.JUMPS:
                name = instr.target()

                if name not in self.labels and name not in missing:
                    missing.append(name)

        return missing

    def listing(self) -> str:
        by_index: Dict[int, List[str]] = dict()

        for name, index in self.labels.items():
            by_index.setdefault(index, []).append(name)

        lines = []

        for index in range(len(self.instructions) + 1):
            lines.extend(f'{name}:' for name in by_index.get(index, []))

            if index < len(self.instructions):
                lines.append(f'    {self.instructions[index]}')

        return '\n'.join(lines)
