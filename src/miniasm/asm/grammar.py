# type: ignore
''' Line-oriented assembly syntax '''

import pyparsing as pp

import miniasm.common.ops as ops
from miniasm.asm.builder import Builder


comment = pp.Suppress(pp.Regex(r'(//|;)[^\n]*'))

mnemonic = pp.MatchFirst([pp.Keyword(name) for name in ops.NAMES])

id = ~mnemonic + pp.Word(pp.alphas + '_', pp.alphanums + '_')

label = (id + pp.Suppress(':')).set_parse_action(lambda r: (Builder.on_label, r))

# Operands never cross a line break
pp.ParserElement.set_default_whitespace_chars(' \t')

reserved = pp.MatchFirst([pp.Keyword(name) for name in ops.NAMES])

# Kept as text, the builder decides what a token means in its position
s_dec_const = pp.Regex('[+-]?[0-9]+')
name_ref = ~reserved + pp.Word(pp.alphas + '_', pp.alphanums + '_') + ~pp.Literal(':')
operand = s_dec_const ^ name_ref

operands = pp.Optional(operand + pp.Optional(pp.Suppress(',') + operand))

pp.ParserElement.set_default_whitespace_chars(' \n\t\r')

instruction = (mnemonic + operands).set_parse_action(lambda r: (Builder.on_instruction, r))

statement = ((label + pp.Optional(instruction)) ^ instruction) + pp.Optional(comment)

# Fail on unknown command, up to the last visible character of the line
unknown = pp.Regex(r'[^\n]*[^\s]').set_parse_action(lambda r: (Builder.on_fail, r))

program = pp.ZeroOrMore(statement ^ comment ^ unknown)
