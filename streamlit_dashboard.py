import html

import streamlit as st
import pandas as pd
import plotly.graph_objects as go

from leetboard.config import ASCENDING, REQUIRED_COLUMNS, SORTABLE_COLUMNS
from leetboard.display import chart_labels, pending_upload, profile_url
from leetboard.ingestion.errors import FileReadError, FormatError, UploadInProgressError
from leetboard.ranking.pipeline import ingest_roster
from leetboard.ranking.view import (
    initial_state,
    on_page_next,
    on_page_prev,
    on_sort_click,
    on_upload,
    page_view,
)
from leetboard.utils import decode_upload, setup_logging

logger = setup_logging(__name__)

# --- Page Configuration ---
st.set_page_config(
    page_title="LeetBoard",
    page_icon="🏆",
    layout="wide",
    initial_sidebar_state="collapsed"
)

# --- Design System ---
ACCENT_COLORS = {
    "primary": "#FF6B6B",       # Coral red - primary accent
    "easy": "#10B981",          # Green
    "medium": "#F59E0B",        # Amber
    "hard": "#EF4444",          # Red
}

# --- Leaderboard Flourishes ---
# Icons and decorations for top students
RANK_ICONS = {
    1: {"icon": "👑", "color": "#FFD700", "label": "Champion"},
    2: {"icon": "🥈", "color": "#C0C0C0", "label": "Runner-up"},
    3: {"icon": "🥉", "color": "#CD7F32", "label": "Third Place"},
}

CUSTOM_CSS = """
<style>
    .card-header { display:flex; align-items:center; gap:1rem; margin-bottom:0.5rem; }
    .card-rank { min-width:3rem; text-align:center; font-weight:700; }
    .card-name { flex:1; display:flex; flex-direction:column; }
    .card-name-text { font-weight:600; font-size:1.05rem; }
    .card-sub { font-size:0.75rem; opacity:0.7; }
    .card-total { font-size:1.4rem; font-weight:700; color:#FF6B6B; }
    .stats-grid { display:grid; grid-template-columns:repeat(3, 1fr); gap:0.5rem; }
</style>
"""


def get_rank_badge_html(rank):
    """Generate HTML for a rank badge with icon and styling."""
    if pd.isna(rank):
        return ""
    rank = int(rank)
    if rank not in RANK_ICONS:
        return f'<span style="color:{ACCENT_COLORS["primary"]};">#{rank}</span>'

    info = RANK_ICONS[rank]
    return f'<span style="color:{info["color"]};font-size:1.2rem;" title="{info["label"]}">{info["icon"]}</span>'


def generate_student_cards(df, offset=0):
    """
    Generate HTML cards for one leaderboard page.
    Shows: S. No., Rank, Name, Roll Number, Username, Total, Easy, Medium, Hard.
    """
    if df.empty:
        return "<p>No students to show</p>"

    card_base = "border:1px solid rgba(255,255,255,0.2);border-radius:12px;padding:1rem;margin-bottom:0.75rem;box-shadow:0 4px 20px rgba(0,0,0,0.15);background:linear-gradient(135deg, var(--secondary-background-color) 0%, rgba(255,107,107,0.15) 100%);"
    stat_layout = "display:flex;flex-direction:column;align-items:center;text-align:center;"
    label_style = "font-size:0.8rem;text-transform:uppercase;color:var(--text-color);font-weight:500;"

    cards = []
    for serial, (_, row) in enumerate(df.iterrows(), start=offset + 1):
        name = html.escape(str(row['name']))
        roll = html.escape(str(row['roll_number']))
        username = html.escape(str(row["leetcode_username"]))
        profile = html.escape(profile_url(str(row["leetcode_username"])), quote=True)

        stats_html = ""
        for label, col, color in (
            ("Easy", 'easy_solved', ACCENT_COLORS["easy"]),
            ("Medium", 'medium_solved', ACCENT_COLORS["medium"]),
            ("Hard", 'hard_solved', ACCENT_COLORS["hard"]),
        ):
            stats_html += f'<div style="{stat_layout}"><span style="{label_style}">{label}</span><span style="font-size:1.2rem;font-weight:700;color:{color};">{int(row[col])}</span></div>'

        card = (
            f'<div style="{card_base}"><div class="card-header">'
            f'<div class="card-rank"><span class="card-sub">{serial}.</span> {get_rank_badge_html(row["rank"])}</div>'
            f'<div class="card-name"><span class="card-name-text">{name}</span><span class="card-sub">{roll} · <a href="{profile}" target="_blank" rel="noopener">@{username}</a></span></div>'
            f'<div class="card-total">{int(row["total_solved"])}</div>'
            f'</div><div class="stats-grid">{stats_html}</div></div>'
        )
        cards.append(card)

    return "".join(cards)


def build_difficulty_chart(df):
    """Stacked bar chart of easy/medium/hard solved for the students on the page."""
    fig = go.Figure()
    labels = chart_labels(df)
    for label, col, color in (
        ("Easy", 'easy_solved', ACCENT_COLORS["easy"]),
        ("Medium", 'medium_solved', ACCENT_COLORS["medium"]),
        ("Hard", 'hard_solved', ACCENT_COLORS["hard"]),
    ):
        fig.add_trace(go.Bar(name=label, x=labels, y=df[col], marker_color=color))

    fig.update_layout(
        barmode='stack',
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=10, r=10, t=30, b=10),
        legend=dict(orientation="h", bgcolor="rgba(0,0,0,0)"),
        yaxis=dict(title="Solved", gridcolor="rgba(128, 128, 128, 0.4)"),
        dragmode=False,  # Disable pan/zoom to prevent scroll hijacking on mobile
    )
    return fig


def sort_indicator(sort, key):
    if sort.key != key:
        return "↕"
    return "▲" if sort.direction == ASCENDING else "▼"


def handle_upload(uploaded_file):
    """
    Run the reconciliation pass for a newly selected file and swap in the result.

    Returns True only when the leaderboard was replaced.
    """
    try:
        text = decode_upload(uploaded_file.getvalue())
    except FileReadError as e:
        logger.error(f"Failed to read upload: {e}")
        st.error(f"Error Reading File: {e}")
        return False

    progress_bar = st.progress(0.0, text="Processing...")

    def show_progress(done, total, row):
        progress_bar.progress(done / total, text=f"Fetched {done} of {total}: {row.leetcode_username}")

    try:
        result = ingest_roster(text, progress=show_progress)
    except (FormatError, UploadInProgressError, ValueError) as e:
        logger.error(f"Failed to process CSV: {e}")
        st.error(f"Error Processing CSV: {e}")
        return False
    finally:
        progress_bar.empty()

    st.session_state.board = on_upload(st.session_state.board, result['students'])
    st.toast(f"Processed {result['rows']} students successfully.")
    if result['failed']:
        st.warning(f"{result['failed']} students could not be resolved on LeetCode and are shown with zero solved.")
    return True


# --- Main App ---
def main():
    st.html(CUSTOM_CSS)

    st.title("LeetBoard")
    st.caption("Student Leaderboard for LeetCode Performance")

    if 'board' not in st.session_state:
        st.session_state.board = initial_state()

    uploaded_file = st.file_uploader("Upload CSV", type=["csv"])
    # Streamlit reruns the script on every interaction; only a successful ingest marks the file done
    file_id = uploaded_file.file_id if uploaded_file is not None else None
    if pending_upload(st.session_state.get("upload_id"), file_id) and handle_upload(uploaded_file):
        st.session_state.upload_id = file_id

    board = st.session_state.board
    view = page_view(board)

    if view['total_count'] == 0:
        st.info("Upload a roster CSV to build the leaderboard.")
    else:
        st.caption(f"Showing {view['shown_count']} of {view['total_count']} students")

        header_cols = st.columns(len(SORTABLE_COLUMNS))
        for col, (key, label) in zip(header_cols, SORTABLE_COLUMNS.items()):
            if col.button(f"{label} {sort_indicator(view['sort'], key)}", key=f"sort_{key}", use_container_width=True):
                st.session_state.board = on_sort_click(board, key)
                st.rerun()

        cards_html = generate_student_cards(view['rows'], offset=view['offset'])
        st.markdown(f'<div class="ranking-cards">{cards_html}</div>', unsafe_allow_html=True)

        col_prev, col_page, col_next = st.columns([1, 2, 1])
        if col_prev.button("Previous", disabled=view['current_page'] <= 1, use_container_width=True):
            st.session_state.board = on_page_prev(board)
            st.rerun()
        col_page.markdown(
            f"<div style='text-align:center;'>Page {view['current_page']} of {view['total_pages']}</div>",
            unsafe_allow_html=True,
        )
        if col_next.button("Next", disabled=view['current_page'] >= view['total_pages'], use_container_width=True):
            st.session_state.board = on_page_next(board)
            st.rerun()

        st.plotly_chart(build_difficulty_chart(view['rows']), use_container_width=True)

        st.download_button(
            "Download leaderboard CSV",
            data=board.students.to_csv(index=False),
            file_name="leetboard_leaderboard.csv",
            mime="text/csv",
        )

    with st.expander("CSV Format Instructions"):
        st.markdown(
            "To upload your own student data, please ensure your CSV file contains the following headers: "
            + ", ".join(f"`{h}`" for h in REQUIRED_COLUMNS)
        )
        st.markdown("The app will fetch the LeetCode statistics automatically based on the provided usernames.")


if __name__ == "__main__":
    main()
