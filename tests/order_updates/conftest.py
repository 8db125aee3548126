import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def order_updates_bed():
    from order_updates.domain import order_updates

    bed = DomainFixture(order_updates)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(order_updates_bed):
    with order_updates_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
