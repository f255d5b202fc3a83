import logging as lg
from typing import List

import miniasm.common.ops as ops
from miniasm.common.ops import Flag
from miniasm.common.errors import UnresolvedLabel
from miniasm.common.program import Program, Instruction, Register
from miniasm.common.settings import MachineSettings
from miniasm.runtime.registers import RegisterBank, resolve


class Halt(Exception):
    pass


class CPU():
    ip: int      # Instruction pointer
    flag: Flag   # Last comparison result
    regs: RegisterBank

    def __init__(self, program: Program, settings: MachineSettings | None = None):
        self.program = program
        self.settings = settings if settings is not None else MachineSettings()

        self.ip = 0
        self.flag = Flag.EQUAL
        self.regs = RegisterBank(program.registers)

    def reset(self):
        self.ip = 0
        self.flag = Flag.EQUAL
        self.regs.reset()

    @property
    def halted(self) -> bool:
        return self.ip >= len(self.program.instructions)

    # - Helpers - #

    def debug_dump(self):
        lg.debug(f'IP:{self.ip} FLAG:{self.flag.name} {self.regs}')

    def value(self, instr: Instruction, i: int) -> int:
        return resolve(instr.operands[i], self.regs)

    def dst(self, instr: Instruction) -> str:
        reg = instr.operands[0]
        assert isinstance(reg, Register)
        return reg.name

    def goto(self, instr: Instruction):
        name = instr.target()

        if name not in self.program.labels:
            raise UnresolvedLabel(name, self.ip, self.regs.snapshot())

        self.ip = self.program.labels[name]

    # - Operations - #

    def mov(self, instr: Instruction):
        self.regs.set(self.dst(instr), self.value(instr, 1))

    def inc(self, instr: Instruction):
        step = self.value(instr, 1)
        reg = self.dst(instr)
        self.regs.set(reg, self.regs.get(reg) + step)

    def dec(self, instr: Instruction):
        step = self.value(instr, 1)
        reg = self.dst(instr)
        self.regs.set(reg, self.regs.get(reg) - step)

    def cmp(self, instr: Instruction):
        self.flag = Flag.compare(self.value(instr, 0), self.value(instr, 1))

    def jmp(self, instr: Instruction):
        self.goto(instr)

    def jcc(self, instr: Instruction):
        if self.flag.holds(instr.op):
            self.goto(instr)
        else:
            self.ip += 1

    HANDLERS = {
        ops.MOV: mov,
        ops.INC: inc,
        ops.DEC: dec,
        ops.CMP: cmp,

        ops.JMP: jmp,
        ops.JE: jcc,
        ops.JNE: jcc,
        ops.JL: jcc,
        ops.JLE: jcc,
        ops.JG: jcc,
        ops.JGE: jcc,
    }

    # -- Implementation -- #

    def exec_next(self):
        if self.halted:
            raise Halt()

        instr = self.program.instructions[self.ip]

        if self.settings.trace:
            lg.debug(f'{self.ip}: {instr}')

        handler = self.HANDLERS[instr.op]
        handler(self, instr)

        # Jumps set the pointer themselves
        if instr.op not in ops.JUMPS:
            self.ip += 1

        if self.settings.trace:
            self.debug_dump()

    def run(self) -> List[int]:
        steps = 0

        while not self.halted:
            self.exec_next()
            steps += 1

        lg.debug(f'Halted after {steps} steps')
        self.debug_dump()
        return self.regs.snapshot()
