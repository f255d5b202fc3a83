import pytest

import miniasm.asm.asm as asm
import miniasm.common.ops as ops
from miniasm.common.errors import UnknownRegister, UnresolvedLabel, MalformedInstruction, MalformedOperand
from miniasm.common.program import Register, Literal, LabelRef

from unit_utils import execute_source, execute_single_asm_source


def test_countdown():
    assert execute_single_asm_source('testdata/asm/countdown.asm') == [15, 15, 0, 0]


def test_forward():
    assert execute_single_asm_source('testdata/asm/forward.asm') == [0, 0, 9, 0]


def test_multiply():
    assert execute_single_asm_source('testdata/asm/multiply.asm') == [42, 6, 0, 0]


def test_unresolved():
    with pytest.raises(UnresolvedLabel):
        execute_single_asm_source('testdata/asm/unresolved.asm')


def test_broken():
    with pytest.raises(MalformedInstruction) as e:
        execute_single_asm_source('testdata/asm/broken.asm')

    assert 'push ax' in str(e.value)


def test_labels_and_operands():
    program = asm.assemble('\n'.join([
        'start: mov ax, -2   ; set up',
        '       cmp ax, bx',
        'again:',
        'end:   jmp start',
    ]))

    assert program.labels == {'start': 0, 'again': 2, 'end': 2}
    assert [i.op for i in program.instructions] == [ops.MOV, ops.CMP, ops.JMP]
    assert program.instructions[0].operands == (Register('ax'), Literal(-2))
    assert program.instructions[2].operands == (LabelRef('start'),)


def test_one_operand_inc_before_label():
    program = asm.assemble('inc ax\nnext:\ndec bx\n')

    assert program.labels == {'next': 1}
    assert program.instructions[0].operands == (Register('ax'), Literal(1))


def test_listing():
    source = 'top:\n    inc ax, 1\n    cmp ax, 3\n    jl top\n'
    program = asm.assemble(source)

    assert program.listing() == source.rstrip('\n')


def test_backward_loop_source():
    assert execute_source('top: inc ax, 1\ncmp ax, 3\njl top') == [3, 0, 0, 0]


def test_inc_by_itself_source():
    assert execute_source('mov ax, 7\ninc ax, ax') == [14, 0, 0, 0]


def test_empty_source():
    assert execute_source('// nothing here\n\n') == [0, 0, 0, 0]


def test_unknown_register():
    with pytest.raises(UnknownRegister):
        asm.assemble('mov ex, 1')


def test_missing_operand():
    with pytest.raises(MalformedInstruction):
        asm.assemble('mov ax\n')


def test_extra_operand():
    with pytest.raises(MalformedInstruction):
        asm.assemble('mov ax, 1, 2\n')


def test_malformed_operand():
    with pytest.raises(MalformedInstruction):
        asm.assemble('mov ax, 5x\n')


def test_literal_as_destination():
    with pytest.raises(MalformedOperand):
        asm.assemble('mov 3, ax\n')


def test_custom_registers():
    program = asm.assemble('mov r3, 1', registers=['r0', 'r1', 'r2', 'r3'])
    assert program.registers == ('r0', 'r1', 'r2', 'r3')


def test_operand_on_next_line():
    with pytest.raises(MalformedInstruction):
        asm.assemble('inc\nax\n')


def test_second_operand_on_next_line():
    with pytest.raises(MalformedInstruction):
        asm.assemble('mov bx,\n5\n')


def test_instruction_after_label_line():
    program = asm.assemble('top:\n\n    jmp top\n')

    assert program.labels == {'top': 0}
    assert program.instructions[0].operands == (LabelRef('top'),)
