from datetime import datetime, timezone

import pytest

from jwtlic.common.models import Algorithm, LicenseClaims, ParsedToken


def test_license_claims_defaults() -> None:
    claims = LicenseClaims()
    assert claims.plan_id is None
    assert claims.email is None
    assert claims.uid is None
    assert claims.limits is None
    assert claims.to_payload() == {}


def test_license_claims_keep_falsy_values() -> None:
    claims = LicenseClaims(plan_id=0, email="", permissions=[])
    assert claims.plan_id == 0
    assert claims.email == ""
    assert claims.to_payload() == {"plan_id": 0, "email": "", "permissions": []}


def test_license_claims_keep_extra_claims() -> None:
    claims = LicenseClaims.model_validate(
        {"plan_id": 4, "plan_name": "Pro", "limits": {"rooms": 10}, "custom": "x"}
    )
    assert claims.plan_name == "Pro"
    assert claims.limits == {"rooms": 10}
    assert claims.to_payload()["custom"] == "x"


def test_algorithm_resolve() -> None:
    assert Algorithm.resolve("RS256") is Algorithm.RS256
    assert Algorithm.resolve(Algorithm.HS256) is Algorithm.HS256
    assert Algorithm.RS256.is_asymmetric
    assert not Algorithm.HS256.is_asymmetric


def test_algorithm_resolve_unsupported() -> None:
    with pytest.raises(ValueError, match="RS256, HS256"):
        Algorithm.resolve("ES256")


def test_parsed_token_claim_access() -> None:
    parsed = ParsedToken(claims={"foo": "bar", "iat": 1})
    assert parsed["foo"] == "bar"
    assert "foo" in parsed
    assert "missing" not in parsed
    assert parsed.get("missing", 7) == 7  # noqa: PLR2004
    with pytest.raises(KeyError):
        parsed["missing"]


def test_parsed_token_validity() -> None:
    assert ParsedToken().is_valid is True
    assert ParsedToken(expires_at=datetime(2000, 1, 1, tzinfo=timezone.utc)).is_valid is False
    assert ParsedToken(expires_at=datetime(2999, 1, 1, tzinfo=timezone.utc)).is_valid is True
