"""
Tests for simlog.component — LogComponent state and the emit layer.
"""

import pytest

from simlog import LogComponent
from simlog.levels import (
    NONE, ERROR, WARN, DEBUG, INFO, FUNCTION, LOGIC, ALL,
    LEVEL_WARN, LEVEL_DEBUG, LEVEL_ALL,
    PREFIX_FUNC, PREFIX_TIME, PREFIX_NODE, PREFIX_LEVEL, PREFIX_ALL,
)
from simlog.registry import get_registry


@pytest.fixture
def comp(registry):
    return LogComponent("Radio", registry=registry)


# =============================================================================
# Construction
# =============================================================================

class TestConstruction:

    def test_starts_at_none(self, comp):
        assert comp.is_none_enabled()
        assert comp.levels == NONE
        assert comp.mask == NONE

    def test_name_is_read_only(self, comp):
        assert comp.name == "Radio"
        with pytest.raises(AttributeError):
            comp.name = "Other"

    def test_registers_with_registry(self, registry, comp):
        assert registry.find("Radio") is comp

    def test_default_registry_used_when_omitted(self):
        comp = LogComponent("Default")
        assert get_registry().find("Default") is comp
        assert comp.registry is get_registry()

    def test_initial_mask_blocks_bits(self, registry):
        comp = LogComponent("Masked", mask=DEBUG, registry=registry)
        comp.enable(LEVEL_ALL)
        assert comp.is_enabled(ERROR)
        assert not comp.is_enabled(DEBUG)


# =============================================================================
# Enable / disable / mask
# =============================================================================

class TestEnableDisable:

    @pytest.mark.parametrize("bit", [ERROR, WARN, DEBUG, INFO, FUNCTION, LOGIC])
    def test_enable_then_is_enabled(self, comp, bit):
        comp.enable(bit)
        assert comp.is_enabled(bit)

    def test_enable_disable_returns_to_none(self, comp):
        comp.enable(INFO)
        comp.disable(INFO)
        assert comp.is_none_enabled()

    def test_cumulative_enable(self, comp):
        comp.enable(LEVEL_WARN)
        assert comp.is_enabled(ERROR)
        assert comp.is_enabled(WARN)
        assert not comp.is_enabled(DEBUG)

    def test_disable_leaves_other_bits(self, comp):
        comp.enable(LEVEL_DEBUG)
        comp.disable(WARN)
        assert comp.is_enabled(ERROR)
        assert comp.is_enabled(DEBUG)
        assert not comp.is_enabled(WARN)

    def test_prefix_and_severity_compose(self, comp):
        comp.enable(INFO | PREFIX_TIME)
        assert comp.is_enabled(PREFIX_TIME)
        assert comp.is_enabled(INFO)
        assert not comp.is_enabled(PREFIX_NODE)

    def test_unknown_bits_are_inert(self, comp):
        comp.disable(0x40000)
        assert comp.is_none_enabled()


class TestSetMask:

    def test_set_mask_clears_enabled_bits(self, comp):
        comp.enable(LOGIC)
        comp.set_mask(LOGIC)
        assert not comp.is_enabled(LOGIC)

    def test_masked_enable_is_dropped(self, comp):
        comp.set_mask(FUNCTION)
        comp.enable(FUNCTION | INFO)
        assert not comp.is_enabled(FUNCTION)
        assert comp.is_enabled(INFO)

    def test_set_mask_idempotent(self, comp):
        comp.set_mask(DEBUG)
        comp.set_mask(DEBUG)
        assert comp.mask == DEBUG

    def test_levels_and_mask_never_overlap(self, comp):
        comp.enable(ALL | PREFIX_ALL)
        comp.set_mask(WARN | PREFIX_NODE)
        comp.enable(ALL | PREFIX_ALL)
        assert comp.levels & comp.mask == NONE

    def test_get_level_label(self):
        assert LogComponent.get_level_label(WARN) == "WARN"


# =============================================================================
# Emit layer
# =============================================================================

class TestEmit:

    def test_disabled_level_writes_nothing(self, comp, buf):
        comp.debug("hidden")
        assert buf.getvalue() == ""

    def test_enabled_level_writes_line(self, comp, buf):
        comp.enable(WARN)
        comp.warn("queue full at {n}", n=3)
        assert buf.getvalue() == "queue full at 3\n"

    def test_each_severity_gated_on_its_bit(self, comp, buf):
        comp.enable(ERROR | INFO)
        comp.error("e")
        comp.warn("w")
        comp.debug("d")
        comp.info("i")
        comp.logic("l")
        assert buf.getvalue() == "e\ni\n"

    def test_log_with_explicit_level(self, comp, buf):
        comp.enable(LOGIC)
        comp.log(LOGIC, "branch taken")
        comp.log(DEBUG, "not shown")
        assert buf.getvalue() == "branch taken\n"

    def test_level_prefix(self, comp, buf):
        comp.enable(LEVEL_WARN | PREFIX_LEVEL)
        comp.warn("careful")
        assert buf.getvalue() == "[WARN] careful\n"

    def test_func_prefix_names_caller(self, comp, buf):
        comp.enable(INFO | PREFIX_FUNC)

        def transmit():
            comp.info("sent")

        transmit()
        assert buf.getvalue() == "Radio:transmit(): sent\n"

    def test_time_and_node_prefixes(self, registry, comp, buf):
        registry.printers.time = lambda f: f.write("+1.5s")
        registry.printers.node = lambda f: f.write("7")
        comp.enable(INFO | PREFIX_TIME | PREFIX_NODE | PREFIX_LEVEL)
        comp.info("up")
        assert buf.getvalue() == "+1.5s 7 [INFO] up\n"

    def test_unset_printers_print_nothing(self, comp, buf):
        comp.enable(INFO | PREFIX_TIME | PREFIX_NODE)
        comp.info("up")
        assert buf.getvalue() == "up\n"

    def test_uncond_ignores_levels(self, comp, buf):
        comp.uncond("always {x}", x=1)
        assert buf.getvalue() == "always 1\n"

    def test_braces_left_alone_without_kwargs(self, comp, buf):
        comp.enable(INFO)
        comp.info("dict {not a field}")
        assert buf.getvalue() == "dict {not a field}\n"


class TestFunctionTrace:

    def test_function_line_with_params(self, comp, buf):
        comp.enable(FUNCTION)

        def send(size, dest):
            comp.function(size, dest)

        send(64, "10.1.1.2")
        assert buf.getvalue() == "Radio:send(64, 10.1.1.2)\n"

    def test_function_no_params(self, comp, buf):
        comp.enable(FUNCTION)

        def start():
            comp.function()

        start()
        assert buf.getvalue() == "Radio:start()\n"

    def test_function_gated(self, comp, buf):
        comp.enable(LEVEL_DEBUG)
        comp.function(1, func_name="f")
        assert buf.getvalue() == ""

    def test_function_takes_time_prefix_only(self, registry, comp, buf):
        registry.printers.time = lambda f: f.write("2.0s")
        comp.enable(FUNCTION | PREFIX_ALL)
        comp.function(1, func_name="f")
        assert buf.getvalue() == "2.0s Radio:f(1)\n"
