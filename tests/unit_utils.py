from pathlib import Path

import miniasm.asm.asm as asm
import miniasm.runtime.emulator as emulator


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def execute_source(source: str):
    program = asm.assemble(source)
    return emulator.execute(program)


def execute_single_asm_source(filename: str):
    program = asm.assemble_file(find_file(filename))
    return emulator.execute(program)
