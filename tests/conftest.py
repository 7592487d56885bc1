import pytest

# Engine-level tests run once per evaluation engine:
# 1) the tree-walking evaluator ["interp"]
# 2) the bytecode compiler + VM ["vm"]
# 3) the bytecode compiler + VM with the optimizer forced on ["vm_opt"]


@pytest.fixture(params=["interp", "vm", "vm_opt"])
def engine_mode(request):
    return request.param


@pytest.fixture
def evaluator(engine_mode, monkeypatch):
    from varcore.interpreter import Evaluator
    monkeypatch.delenv("VARCORE_DISASM", raising=False)
    if engine_mode == "interp":
        return Evaluator(engine="interp")
    return Evaluator(engine="vm", optimize=(engine_mode == "vm_opt"))
