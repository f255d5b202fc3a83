import logging as lg
from pathlib import Path
from typing import Sequence

import pyparsing as pp

import miniasm.asm.grammar as grammar
from miniasm.asm.builder import Builder
from miniasm.common.errors import MalformedInstruction
from miniasm.common.hwconf import REGISTERS
from miniasm.common.program import Program


def assemble(source: str, registers: Sequence[str] = REGISTERS) -> Program:
    builder = Builder(registers)

    try:
        actions = grammar.program.parse_string(source, parse_all=True)
    except pp.ParseException as e:
        raise MalformedInstruction(f'Unable to parse line {e.lineno}: {e.line!r}') from e

    # Replay in source order, labels and instructions interleaved
    for (func, arg) in actions:
        func(builder, arg)

    program = builder.build()
    lg.info(f'Assembled {len(program)} instructions, {len(program.labels)} labels')
    return program


def assemble_file(filepath: str | Path, registers: Sequence[str] = REGISTERS) -> Program:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Assembling file {filepath}')
    return assemble(filepath.read_text(), registers)
