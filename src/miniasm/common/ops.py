import operator
from enum import IntEnum


# Data
MOV = 0x01  # V2 -> R1
INC = 0x02  # R1 + V2 -> R1
DEC = 0x03  # R1 - V2 -> R1
CMP = 0x04  # V1 <=> V2 -> flag

# Control
JMP = 0x10  # goto L1
JE = 0x11   # if flag .eq jmp L1
JNE = 0x12  # if flag .ne jmp L1
JL = 0x13   # if flag .lt jmp L1
JLE = 0x14  # if flag .le jmp L1
JG = 0x15   # if flag .gt jmp L1
JGE = 0x16  # if flag .ge jmp L1


NAMES = {
    'mov': MOV,
    'inc': INC,
    'dec': DEC,
    'cmp': CMP,
    'jmp': JMP,
    'je': JE,
    'jne': JNE,
    'jl': JL,
    'jle': JLE,
    'jg': JG,
    'jge': JGE,
}

MNEMONICS = {op: name for name, op in NAMES.items()}

JUMPS = frozenset([JMP, JE, JNE, JL, JLE, JG, JGE])

# Relation between the flag and EQUAL that makes the jump taken
CONDITIONS = {
    JE: operator.eq,
    JNE: operator.ne,
    JL: operator.lt,
    JLE: operator.le,
    JG: operator.gt,
    JGE: operator.ge,
}

# Allowed operand counts
ARITY = {
    MOV: (2,),
    INC: (1, 2),
    DEC: (1, 2),
    CMP: (2,),
    JMP: (1,),
    JE: (1,),
    JNE: (1,),
    JL: (1,),
    JLE: (1,),
    JG: (1,),
    JGE: (1,),
}


class Flag(IntEnum):
    ''' Result of the last comparison '''
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def compare(cls, a: int, b: int) -> 'Flag':
        if a < b:
            return cls.LESS

        if a > b:
            return cls.GREATER

        return cls.EQUAL

    def holds(self, jump: int) -> bool:
        return CONDITIONS[jump](self, Flag.EQUAL)
