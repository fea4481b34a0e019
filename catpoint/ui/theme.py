from __future__ import annotations

COLOR_OK = "#34d399"          # emerald-400, no alarm / inactive sensor
COLOR_WARN = "#fbbf24"        # amber-400, pending alarm / active sensor
COLOR_CRIT = "#f43f5e"        # rose-500, alarm / cat detected
COLOR_TEXT_MUTED = "#8b9bb4"
COLOR_ACCENT = "#0e7490"      # cyan-700
COLOR_ARMED = "#b45309"       # amber-700

APP_QSS = f"""
QMainWindow {{
    background: #0a0f1a;
    color: #dbe4f0;
    font-family: Segoe UI, Arial;
    font-size: 12px;
}}

QLabel {{
    color: #dbe4f0;
}}
QLabel#PanelTitle {{
    font-size: 14px;
    font-weight: 700;
    letter-spacing: 1px;
}}
QLabel#CameraView {{
    background: #05080f;
    border: 1px dashed #243044;
    border-radius: 8px;
    color: {COLOR_TEXT_MUTED};
}}

QFrame#Card {{
    background: #111827;
    border: 1px solid #1e293b;
    border-radius: 10px;
}}

QTableWidget {{
    background: #0d1422;
    alternate-background-color: #121b2c;
    border: 1px solid #1e293b;
    border-radius: 8px;
    gridline-color: #1e293b;
    color: #dbe4f0;
    selection-background-color: {COLOR_ACCENT};
}}
QHeaderView::section {{
    background: #111827;
    color: {COLOR_TEXT_MUTED};
    border: 0px;
    padding: 6px;
    font-weight: 600;
}}

QLineEdit, QComboBox {{
    background: #0d1422;
    border: 1px solid #243044;
    border-radius: 6px;
    padding: 6px;
    color: #dbe4f0;
}}
QLineEdit:focus, QComboBox:focus {{
    border: 1px solid {COLOR_ACCENT};
}}

QPushButton {{
    background: {COLOR_ACCENT};
    border: 0px;
    padding: 8px 12px;
    border-radius: 6px;
    color: #ffffff;
    font-weight: 600;
}}
QPushButton:hover {{
    background: #0891b2;
}}
QPushButton:disabled {{
    background: #1e293b;
    color: {COLOR_TEXT_MUTED};
}}

/* Arming buttons: the selected mode stays highlighted. */
QPushButton#ArmButton {{
    background: #1e293b;
}}
QPushButton#ArmButton:checked {{
    background: {COLOR_ARMED};
}}

QPushButton#DangerButton {{
    background: #9f1239;
}}
QPushButton#DangerButton:hover {{
    background: {COLOR_CRIT};
}}
"""
