# app/utils/html_view.py
"""
Renders the vehicle registry page: status/error banner, creation form, table.
All values are HTML-escaped before being placed in the page.
"""

from html import escape
from typing import Iterable, Optional
from app.models.vehicle import Vehicle

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Vehicle Registry</title>
</head>
<body>
  <h1>Vehicle Registry</h1>
{banner}
  <form method="post" action="/vehicles">
    <label>Plate <input name="plate" required></label>
    <label>Make <input name="make" required></label>
    <label>Year <input name="model" required></label>
    <label>Color
      <select name="color">
{color_options}
      </select>
    </label>
    <label>Owner <input name="owner" required></label>
    <button type="submit">Add vehicle</button>
  </form>
  <table border="1">
    <thead>
      <tr><th>ID</th><th>Plate</th><th>Make</th><th>Year</th><th>Color</th><th>Owner</th></tr>
    </thead>
    <tbody>
{rows}
    </tbody>
  </table>
</body>
</html>
"""


def _row(v: Vehicle) -> str:
    cells = (v.id, v.plate, v.make, v.model, v.color, v.owner)
    return "      <tr>" + "".join(f"<td>{escape(str(c))}</td>" for c in cells) + "</tr>"


def render_vehicle_page(
    vehicles: Iterable[Vehicle],
    colors: Iterable[str],
    message: Optional[str] = None,
    error: Optional[str] = None,
) -> str:
    banner = []
    if message:
        banner.append(f'  <p class="message">{escape(message)}</p>')
    if error:
        banner.append(f'  <p class="error">{escape(error)}</p>')

    rows = [_row(v) for v in vehicles] or ['      <tr><td colspan="6">No vehicles registered</td></tr>']
    options = [f'        <option value="{escape(c)}">{escape(c)}</option>' for c in colors]

    return PAGE_TEMPLATE.format(
        banner="\n".join(banner),
        color_options="\n".join(options),
        rows="\n".join(rows),
    )
