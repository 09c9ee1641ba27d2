import pytest

from feedctl import MissingCapabilityError, Updatable


class Doubler(Updatable):
    def __init__(self):
        self.input = 0.0

    @property
    def output(self):
        return self.input * 2


def test_update_stores_input_and_returns_output():
    d = Doubler()
    assert d.input == 0.0
    assert d.output == 0.0

    output = d.update(45)
    assert d.input == 45
    assert d.output == output == 90


def test_update_requires_output():
    class Bare(Updatable):
        pass

    with pytest.raises(MissingCapabilityError):
        Bare().update(45)


def test_missing_output_is_not_implemented_error():
    class Bare(Updatable):
        pass

    with pytest.raises(NotImplementedError):
        Bare().output


def test_custom_input_slot():
    class Knob(Updatable):
        input_attr = "position"

        def __init__(self):
            self.position = 0

        @property
        def output(self):
            return self.position + 1

    k = Knob()
    assert k.update(4) == 5
    assert k.position == 4


def test_error_types_subclass_builtins():
    from feedctl import InvalidConfigurationError

    assert issubclass(MissingCapabilityError, NotImplementedError)
    assert issubclass(InvalidConfigurationError, ValueError)
