"""
HTML pages: withdrawal form, receipt and admin listing
"""

import html
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, HTMLResponse

from withdraw_receipts.api.deps import get_receipt_service, get_settings
from withdraw_receipts.core.auth import require_admin_key
from withdraw_receipts.core.config import Settings
from withdraw_receipts.models.enums import WithdrawStatus
from withdraw_receipts.models.withdrawal import WithdrawalRecord
from withdraw_receipts.services.receipts import (
    ReceiptService,
    format_amount,
    required_balance,
    unit_for_chain,
)

router = APIRouter(tags=["pages"])

STATUS_CLASSES = {
    WithdrawStatus.PENDING: "pending",
    WithdrawStatus.COMPLETED: "completed",
    WithdrawStatus.REJECTED: "rejected",
}

PAGE_STYLE = """
    body { font-family: Arial, sans-serif; margin: 40px; background: #f5f5f5; color: #222; }
    .container { max-width: 900px; margin: 0 auto; background: white; padding: 30px; border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); }
    h1 { text-align: center; }
    dl { display: grid; grid-template-columns: 180px 1fr; gap: 8px 16px; }
    dt { font-weight: bold; }
    dd { margin: 0; word-break: break-all; }
    table { width: 100%; border-collapse: collapse; font-size: 14px; }
    th, td { border-bottom: 1px solid #ddd; padding: 8px; text-align: left; word-break: break-all; }
    .status { padding: 2px 8px; border-radius: 4px; }
    .pending { background: #fff3cd; color: #856404; }
    .completed { background: #d4edda; color: #155724; }
    .rejected { background: #f8d7da; color: #721c24; }
    .note { margin-top: 20px; padding: 10px; background: #e7f1ff; border-radius: 4px; }
"""


def _e(value) -> str:
    return html.escape("" if value is None else str(value))


def render_page(title: str, body: str, settings: Settings) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{_e(title)} - {_e(settings.brand_name)}</title>
    <style>{PAGE_STYLE}</style>
</head>
<body>
    <div class="container">
        <h1>{_e(settings.brand_name)}</h1>
{body}
    </div>
</body>
</html>"""


def _status_badge(status: WithdrawStatus) -> str:
    return f'<span class="status {STATUS_CLASSES[status]}">{_e(status.value)}</span>'


def render_receipt(record: WithdrawalRecord, settings: Settings) -> str:
    unit = unit_for_chain(record.chain)
    support = ""
    if settings.support_contact:
        support = f'<p class="note">Questions? Contact {_e(settings.support_contact)} and quote your receipt id.</p>'

    body = f"""
        <h2>Withdrawal receipt</h2>
        <dl>
            <dt>Receipt id</dt><dd>{_e(record.id)}</dd>
            <dt>Status</dt><dd>{_status_badge(record.status)}</dd>
            <dt>Submitted</dt><dd>{_e(record.created_at.strftime("%Y-%m-%d %H:%M:%S UTC"))}</dd>
            <dt>Network</dt><dd>{_e(record.chain)} ({_e(unit)})</dd>
            <dt>Amount</dt><dd>{_e(format_amount(record.amount))} {_e(unit)}</dd>
            <dt>Destination</dt><dd>{_e(record.address)}</dd>
            <dt>Public code</dt><dd>{_e(record.public_code)}</dd>
        </dl>
        <p class="note">
            Processing requires an existing balance of at least
            <strong>{_e(required_balance(record.amount))} {_e(unit)}</strong>
            (10% of the requested amount).
        </p>
        {support}"""
    return render_page("Receipt", body, settings)


def render_admin_table(records: List[WithdrawalRecord], settings: Settings) -> str:
    rows = []
    for record in records:
        unit = unit_for_chain(record.chain)
        rows.append(f"""
            <tr>
                <td>{_e(record.created_at.isoformat())}</td>
                <td>{_status_badge(record.status)}</td>
                <td>{_e(record.chain)}</td>
                <td>{_e(format_amount(record.amount))} {_e(unit)}</td>
                <td>{_e(record.address)}</td>
                <td>{_e(record.public_code)}</td>
                <td>{_e(record.source_ip or "-")}</td>
                <td><a href="/receipt/{_e(record.id)}">{_e(record.id)}</a></td>
            </tr>""")

    if not rows:
        rows.append('<tr><td colspan="8">No withdrawal requests yet.</td></tr>')

    body = f"""
        <h2>Withdrawal requests ({len(records)})</h2>
        <table>
            <thead>
                <tr>
                    <th>Created</th><th>Status</th><th>Chain</th><th>Amount</th>
                    <th>Address</th><th>Public code</th><th>IP</th><th>Receipt</th>
                </tr>
            </thead>
            <tbody>{"".join(rows)}
            </tbody>
        </table>"""
    return render_page("Admin", body, settings)


def render_not_found(settings: Settings) -> str:
    body = """
        <h2>Receipt not found</h2>
        <p>No withdrawal request matches this receipt id.</p>"""
    return render_page("Not found", body, settings)


@router.get("/", include_in_schema=False)
async def withdraw_page(settings: Settings = Depends(get_settings)):
    """Serve the withdrawal form"""
    index_path = settings.static_dir / "withdraw.html"
    if index_path.exists():
        return FileResponse(index_path)
    return HTMLResponse("<h1>Withdraw page not found</h1>", status_code=404)


@router.get("/receipt/{receipt_id}", response_class=HTMLResponse)
async def receipt_page(
    receipt_id: str,
    service: ReceiptService = Depends(get_receipt_service),
    settings: Settings = Depends(get_settings),
):
    record = service.get_receipt(receipt_id)
    if record is None:
        return HTMLResponse(render_not_found(settings), status_code=404)
    return HTMLResponse(render_receipt(record, settings))


@router.get("/admin", response_class=HTMLResponse, dependencies=[Depends(require_admin_key)])
async def admin_page(
    service: ReceiptService = Depends(get_receipt_service),
    settings: Settings = Depends(get_settings),
):
    """Admin listing of every withdrawal request"""
    return HTMLResponse(render_admin_table(service.list_records(), settings))
