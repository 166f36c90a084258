import pytest

# This test configuration runs every test twice:
# 1) with tables in the default lenient identity mode ["lenient"]
# 2) with HCONS_STRICT_IDENTITY set, so tables built without an explicit
#    `strict=` argument refuse cross-table handle comparisons ["strict"]
# Tests that care about the mode pass `strict=` to InternTable explicitly.


@pytest.fixture(params=["lenient", "strict"])
def identity_mode(request):
    return request.param


@pytest.fixture(autouse=True)
def _force_identity_mode(identity_mode, monkeypatch):
    if identity_mode == "strict":
        monkeypatch.setenv("HCONS_STRICT_IDENTITY", "1")
    else:
        monkeypatch.delenv("HCONS_STRICT_IDENTITY", raising=False)
    monkeypatch.delenv("HCONS_RENDER_LIMIT", raising=False)
