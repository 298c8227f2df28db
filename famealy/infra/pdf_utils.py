import io
from datetime import datetime
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from famealy.logic.ratings.aggregator import average_score


def generate_pdf_for_meals(family_name, meals):
    """Generate a ranking sheet: Meal / Average / Ratings / Added, in board order (lowest average first)."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"{family_name} – Meal Ratings", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Meal", "Average", "Ratings", "Added"]]
    for meal in meals:
        avg = average_score(meal.ratings)
        added = datetime.fromtimestamp(meal.created_at / 1000).strftime("%b %d, %Y") if meal.created_at else "Recently"
        data.append([
            meal.name,
            f"{avg}" if avg > 0 else "No ratings",
            str(len(meal.ratings)),
            added,
        ])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#0284C7")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (1,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
