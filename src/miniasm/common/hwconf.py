# Register set, in snapshot order
REGISTERS = ('ax', 'bx', 'cx', 'dx')

# Step of a one-operand inc/dec
INC_DEC_DEFAULT_STEP = 1
