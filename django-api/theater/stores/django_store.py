"""Django ORM implementations of the theater stores."""

from collections.abc import Mapping

from theater import models
from theater.domain import Invoice, InvoiceId, Performance, Play, build_catalog
from theater.stores.interfaces import InvoiceStore, PlayStore


class DjangoPlayStore(PlayStore):
    """Play catalog backed by the Django ORM."""

    def get_catalog(self) -> Mapping[str, Play]:
        rows = models.Play.objects.all()
        return build_catalog({row.play_id: Play(name=row.name, genre=row.genre) for row in rows})


class DjangoInvoiceStore(InvoiceStore):
    """Invoice store backed by the Django ORM."""

    def get_invoice(self, invoice_id: InvoiceId) -> Invoice | None:
        row = models.Invoice.objects.filter(pk=invoice_id.value).first()
        if row is None:
            return None
        return Invoice(
            customer=row.customer,
            performances=tuple(
                Performance(play_id=p.play_id, audience=p.audience)
                for p in row.performances.order_by("position")
            ),
        )
