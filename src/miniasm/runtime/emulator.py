import sys
import logging as lg
import traceback
from pathlib import Path
from typing import Callable, List

import click

from miniasm.asm.asm import assemble_file
from miniasm.asm.builder import Builder
from miniasm.common.errors import AsmError, UnresolvedLabel
from miniasm.common.program import Program
from miniasm.common.settings import MachineSettings
import miniasm.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_ASM_ERROR = 1
EXIT_KEYBOARD = 3
EXIT_UNRESOLVED_LABEL = 4
EXIT_CONFIG_ERROR = 5
EXIT_EXEC_ERROR = 100


def execute(program: Program, settings: MachineSettings | None = None) -> List[int]:
    proc = cpu.CPU(program, settings)
    return proc.run()


def evaluate(block: Callable[[Builder], None], settings: MachineSettings | None = None) -> List[int]:
    ''' Build a program by calling block with a fresh builder, then run it '''
    if settings is None:
        settings = MachineSettings()

    builder = Builder(settings.registers)
    block(builder)
    return execute(builder.build(), settings)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-c', '--config', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Machine settings (TOML)')
@click.option('--trace', is_flag=True, help='Log every executed instruction')
@click.option('--listing', is_flag=True, help='Print the assembled program before running')
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def run(verbose: bool, config: Path | None, trace: bool, listing: bool, source: Path):
    try:
        settings = MachineSettings.load(config) if config else MachineSettings()

        if trace:
            settings.update(trace=True)

    except Exception as e:
        lg.basicConfig(level=lg.INFO)
        lg.error(f'Bad settings: {e}')
        sys.exit(EXIT_CONFIG_ERROR)

    level = lg.DEBUG if verbose or settings.trace else lg.INFO
    lg.basicConfig(level=level)
    # basicConfig leaves an already configured root logger alone
    lg.getLogger().setLevel(level)
    lg.info('MINIASM')

    try:
        program = assemble_file(source, settings.registers)

        for name in program.unresolved_labels():
            lg.warning(f'Label {name} is never declared')

        if listing:
            click.echo(program.listing())

        proc = cpu.CPU(program, settings)
        proc.run()
        click.echo(str(proc.regs))
        sys.exit(EXIT_HALT)

    except UnresolvedLabel as e:
        lg.error(f'Execution halted: {e}')
        lg.info(f'Registers at halt: {e.registers}')
        sys.exit(EXIT_UNRESOLVED_LABEL)

    except AsmError as e:
        lg.error(f'Assembly failed: {e}')
        sys.exit(EXIT_ASM_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
