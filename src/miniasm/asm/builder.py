import re
import logging as lg
from typing import Any, Dict, List, Sequence

import miniasm.common.ops as ops
from miniasm.common.hwconf import REGISTERS, INC_DEC_DEFAULT_STEP
from miniasm.common.errors import UnknownRegister, MalformedOperand, MalformedInstruction
from miniasm.common.program import Register, Literal, LabelRef, Operand, Instruction, Program

Tokens = List[Any]

IDENTIFIER = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')
INTEGER = re.compile(r'[+-]?[0-9]+')


class Builder:
    '''
    First pass processor.

    Records instructions and label declarations in the order they are issued.
    Jump targets are kept by name and looked up only when the jump executes,
    so a label may be declared before or after the jumps referring to it.
    '''
    instructions: List[Instruction]
    labels: Dict[str, int]
    registers: tuple[str, ...]

    def __init__(self, registers: Sequence[str] = REGISTERS):
        self.instructions = list()
        self.labels = dict()
        self.registers = tuple(registers)

    # Operand tokens
    def parse_register(self, token: Any) -> Register:
        if isinstance(token, Register):
            token = token.name

        if isinstance(token, str) and IDENTIFIER.fullmatch(token):
            if token not in self.registers:
                raise UnknownRegister(token, self.registers)

            return Register(token)

        raise MalformedOperand(token, 'expected a register')

    def parse_value(self, token: Any) -> Register | Literal:
        if isinstance(token, Literal):
            return token

        if isinstance(token, bool):
            raise MalformedOperand(token, 'not an integer')

        if isinstance(token, int):
            return Literal(token)

        if isinstance(token, str) and INTEGER.fullmatch(token):
            return Literal(int(token))

        if isinstance(token, Register) or (isinstance(token, str) and IDENTIFIER.fullmatch(token)):
            return self.parse_register(token)

        raise MalformedOperand(token)

    def parse_label(self, token: Any) -> LabelRef:
        if isinstance(token, LabelRef):
            return token

        if isinstance(token, str) and IDENTIFIER.fullmatch(token):
            return LabelRef(token)

        raise MalformedOperand(token, 'expected a label name')

    def parse_operands(self, op: int, tokens: Sequence[Any]) -> tuple[Operand, ...]:
        if op in ops.JUMPS:
            return (self.parse_label(tokens[0]),)

        if op == ops.CMP:
            return (self.parse_value(tokens[0]), self.parse_value(tokens[1]))

        dst = self.parse_register(tokens[0])

        if len(tokens) == 1:
            # inc/dec <reg>
            return (dst, Literal(INC_DEC_DEFAULT_STEP))

        return (dst, self.parse_value(tokens[1]))

    # Build phase
    def emit(self, op: int | str, operands: Sequence[Any] = ()) -> Instruction:
        if isinstance(op, str):
            if op.lower() not in ops.NAMES:
                raise MalformedInstruction(f'Unknown command {op!r}')

            op = ops.NAMES[op.lower()]

        if op not in ops.ARITY:
            raise MalformedInstruction(f'Unknown opcode 0x{op:X}')

        if len(operands) not in ops.ARITY[op]:
            expected = ' or '.join(str(n) for n in ops.ARITY[op])

            raise MalformedInstruction(
                f'{ops.MNEMONICS[op]} takes {expected} operand(s), {len(operands)} given'
            )

        instr = Instruction(op, self.parse_operands(op, operands))
        lg.debug(f'Issuing {instr} @ {len(self.instructions)}')
        self.instructions.append(instr)
        return instr

    def declare_label(self, name: str):
        if not isinstance(name, str) or not IDENTIFIER.fullmatch(name):
            raise MalformedOperand(name, 'expected a label name')

        offset = len(self.instructions)

        if name in self.labels:
            lg.warning(f'Label {name} redeclared, {self.labels[name]} -> {offset}')

        self.labels[name] = offset
        lg.debug(f'Label {name} @ {offset}')

    def build(self) -> Program:
        return Program(list(self.instructions), dict(self.labels), self.registers)

    # Method-call front-end
    def label(self, name: str):
        self.declare_label(name)

    def mov(self, dst, src):
        return self.emit(ops.MOV, (dst, src))

    def inc(self, dst, *src):
        return self.emit(ops.INC, (dst, *src))

    def dec(self, dst, *src):
        return self.emit(ops.DEC, (dst, *src))

    def cmp(self, a, b):
        return self.emit(ops.CMP, (a, b))

    def jmp(self, target):
        return self.emit(ops.JMP, (target,))

    def je(self, target):
        return self.emit(ops.JE, (target,))

    def jne(self, target):
        return self.emit(ops.JNE, (target,))

    def jl(self, target):
        return self.emit(ops.JL, (target,))

    def jle(self, target):
        return self.emit(ops.JLE, (target,))

    def jg(self, target):
        return self.emit(ops.JG, (target,))

    def jge(self, target):
        return self.emit(ops.JGE, (target,))

    # Grammar handlers
    def on_label(self, tokens: Tokens):
        self.declare_label(str(tokens[0]))

    def on_instruction(self, tokens: Tokens):
        self.emit(str(tokens[0]), list(tokens[1:]))

    def on_fail(self, rest: Tokens):
        raise MalformedInstruction(f'Unknown command {str(rest[0]).strip()!r}')
