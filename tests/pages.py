"""
Portal-shaped HTML pages for extractor tests.
"""

from __future__ import annotations


ORIGIN = "https://epms.ppra.gov.pk"


def listing_row(
    tender_no: str | None,
    title: str = "Supply of Hospital Beds",
    organization: str = "Health Department Punjab",
    location: str = "Lahore",
    category: str = "Goods",
    tender_type: str = "RFP",
    published: str = "01-05-2025",
    closing_date: str = "20-05-2025",
    closing_time: str = "11:00 AM",
    details_href: str | None = "/public/tenders/tender-details/{no}",
) -> str:
    """One row of the active tenders table."""
    number_cell = f"<strong>{tender_no}</strong>" if tender_no is not None else ""
    link = ""
    if details_href is not None:
        link = f'<a class="btn" href="{details_href.format(no=tender_no)}">View</a>'
    return f"""
    <tr>
      <td>1</td>
      <td class="tender-no">{number_cell}</td>
      <td>
        <strong> {title} </strong>
        <strong>Second heading</strong>
        <div class="tender-org">{organization}</div>
        <span class="text-muted"><i class="ri-map-pin-line"></i> {location} </span>
      </td>
      <td><span class="badge bg-info">{category}</span> <span class="tender-badge">{tender_type}</span></td>
      <td> {published} </td>
      <td><strong>{closing_date}</strong><br><small>{closing_time}</small></td>
      <td>{link}</td>
    </tr>"""


def listing_page(rows: list[str], active: str | None = "1", has_next: bool = True) -> str:
    """A full listing page with pagination bar."""
    pagination = ['<ul class="pagination pagination-custom">', '<li><a href="?page=1">Previous</a></li>']
    if active is not None:
        pagination.append(f'<li class="page-item active"><span class="page-link">{active}</span></li>')
    if has_next:
        pagination.append('<li><a href="?page=2">Next &raquo;</a></li>')
    pagination.append("</ul>")
    return f"""<!DOCTYPE html>
<html>
<head><title>Active Tenders</title></head>
<body>
  <table class="table">
    <thead><tr><th>#</th><th>Tender No</th><th>Details</th><th>Type</th><th>Published</th><th>Closing</th><th></th></tr></thead>
    <tbody>{"".join(rows)}</tbody>
  </table>
  {"".join(pagination)}
</body>
</html>"""


def detail_page(
    title: str = "Supply of Hospital Beds",
    note: str | None = "Bidders must submit original docs",
    remarks: str | None = "Bid security 2%",
    corrigendum: bool = False,
    extra_info_items: str = "",
    documents: str | None = None,
) -> str:
    """A full tender detail page."""
    note_html = f"<h6>Note</h6>\n<p> {note} </p>" if note is not None else ""
    remarks_html = f"<h6>Remarks</h6>\n<p>{remarks}</p>" if remarks is not None else ""
    badge = '<span class="badge badge-corrigendum">Corrigendum</span>' if corrigendum else ""
    if documents is None:
        documents = """
        <a href="/public/pdf?file=tenders/TS123E.pdf"><i class="ri-file-line"></i> Download Tender Document</a>
        <a href="/public/pdf?file=ads/TS123E.jpg">View Advertisement</a>
        <a href="/public/help">Help</a>"""
    return f"""<!DOCTYPE html>
<html>
<body>
  <h1> {title} </h1>
  {badge}
  <div class="detail-card">
    <h5 class="section-title">Organization Details</h5>
    <ul>
      <li><span class="detail-label">Name:</span> <span class="detail-value">Health Department Punjab</span></li>
      <li><span class="detail-label">City :</span> <span class="detail-value"> Lahore </span></li>
      <li><span class="detail-label">Phone:</span> <span class="detail-value">  </span></li>
    </ul>
  </div>
  <div class="detail-card">
    <h5 class="section-title">Tender Information</h5>
    <ul class="list-group">
      <li class="list-group-item d-flex"><span class="detail-label">Tender Type</span><span class="flex-grow-1">Open Competitive Bidding</span></li>
      <li class="list-group-item d-flex"><span class="detail-label">Procurement Category</span><span class="flex-grow-1">Goods</span></li>
      <li class="list-group-item d-flex"><span class="detail-label"></span><span class="flex-grow-1">orphan value</span></li>
      {extra_info_items}
    </ul>
    {note_html}
    {remarks_html}
  </div>
  <div class="detail-card">
    <h5 class="section-title">Important Dates</h5>
    <ul class="list-group">
      <li class="list-group-item"><span class="detail-label">Published</span><span class="flex-grow-1">01-05-2025</span></li>
      <li class="list-group-item"><span class="detail-label">Closing</span><span class="flex-grow-1">20-05-2025 11:00 AM</span></li>
    </ul>
  </div>
  <div class="detail-card">
    <h5 class="section-title">Contact Persons</h5>
    <ul class="list-group">
      <li class="list-group-item"><span class="detail-label">Officer</span><span class="flex-grow-1">A. Khan</span></li>
    </ul>
  </div>
  <div class="documents">{documents}</div>
</body>
</html>"""


