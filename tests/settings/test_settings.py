import pytest

from miniasm.common.hwconf import REGISTERS
from miniasm.common.settings import MachineSettings


def test_defaults():
    settings = MachineSettings()
    assert settings.registers == REGISTERS
    assert settings.trace is False


def test_load(tmp_path):
    config = tmp_path / 'machine.toml'
    config.write_text('[machine]\nregisters = ["r0", "r1"]\ntrace = true\n')

    settings = MachineSettings.load(config)

    assert settings.registers == ('r0', 'r1')
    assert settings.trace is True


def test_load_without_machine_table(tmp_path):
    config = tmp_path / 'empty.toml'
    config.write_text('')

    assert MachineSettings.load(str(config)).registers == REGISTERS


@pytest.mark.parametrize('registers', [
    'abcd',
    [],
    ['r0', 'r0'],
    ['r0', 1],
    ['r0', '1r'],
    ['r0', 'a b'],
    ['mov'],
])
def test_bad_registers(registers):
    with pytest.raises(UserWarning):
        MachineSettings().update(registers=registers)


@pytest.mark.parametrize('trace', ['yes', 1, 0])
def test_bad_trace(trace):
    with pytest.raises(UserWarning):
        MachineSettings().update(trace=trace)


def test_bad_registers_in_file(tmp_path):
    config = tmp_path / 'machine.toml'
    config.write_text('[machine]\nregisters = "abcd"\n')

    with pytest.raises(UserWarning):
        MachineSettings.load(config)
