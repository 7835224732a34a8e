import pytest

from session_state import SessionState
from slides_stubs import FakeSlidesClient


@pytest.fixture
def fake_client():
    return FakeSlidesClient()


@pytest.fixture
def session(fake_client):
    return SessionState(client=fake_client)


@pytest.fixture
def companies_csv(tmp_path):
    path = tmp_path / "companies.csv"
    path.write_text(
        "companyName,location,foundedYear,arr,industry,keyMetrics\n"
        "Hax @ Newark,Newark NJ,2011,20000000,Venture Capital,\"Fast growth, strong team\"\n"
        "Acme,  Springfield ,1999,,Manufacturing,Anvils\n",
        encoding="utf-8",
    )
    return path
