class AsmError(Exception):
    ''' Error in the assembled program '''
    pass


class UnknownRegister(AsmError):
    def __init__(self, name: str, registers: tuple[str, ...]):
        self.name = name
        self.registers = registers
        super().__init__(f'Unknown register {name!r} (known: {", ".join(registers)})')


class MalformedOperand(AsmError):
    def __init__(self, token, reason: str = 'not a register or an integer'):
        self.token = token
        super().__init__(f'Malformed operand {token!r}: {reason}')


class MalformedInstruction(AsmError):
    pass


class UnresolvedLabel(AsmError):
    ''' Jump target missing from the label table, raised during execution '''

    def __init__(self, name: str, index: int, registers: list[int]):
        self.name = name
        self.index = index
        self.registers = registers   # Not a result, diagnostics only
        super().__init__(f'Unresolved label {name!r} at instruction {index}')
