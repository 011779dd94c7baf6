"""
MainWindow — camera preview, the two choice cards, the composed message
and the trigger meters.

The window only observes engine state. Its single write path is the
calibration buttons (and the arrow keys, which inject confirmed actions
without the camera).
"""
from __future__ import annotations
from typing import Callable, Dict, Optional

import cv2
import numpy as np
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPixmap, QColor, QPainter, QBrush, QPen, QKeyEvent
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QPushButton, QTextEdit, QSizePolicy, QFrame,
)

from domain.enums import ActionKind, Channel
from domain.models import Calibration, NavigatorView, TriggerState

# ---- colours per channel (RGB for Qt) -----------------------------------
_CHANNEL_COLORS: Dict[Channel, tuple[int, int, int]] = {
    Channel.LEFT_SMILE:  (40, 190, 170),
    Channel.RIGHT_SMILE: (240, 110, 90),
    Channel.PUCKER:      (230, 190, 60),
}

_DEBUG_KEYS = {
    Qt.Key.Key_Left:  ActionKind.SELECT_LEFT,
    Qt.Key.Key_Right: ActionKind.SELECT_RIGHT,
    Qt.Key.Key_Down:  ActionKind.BACK_OR_DELETE,
}


class MainWindow(QWidget):
    """
    Parameters
    ----------
    on_calibrate : callable(Channel)
        Starts a calibration capture for the chosen channel.
    on_debug_action : callable(ActionKind)
        Injects an action from the keyboard (← → ↓).
    """

    def __init__(
        self,
        on_calibrate: Callable[[Channel], None],
        on_debug_action: Callable[[ActionKind], None],
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._on_calibrate = on_calibrate
        self._on_debug_action = on_debug_action
        self._setup_ui()

    # ------------------------------------------------------------------
    # UI setup
    # ------------------------------------------------------------------
    def _setup_ui(self) -> None:
        self.setWindowTitle("FaceType")
        self.setMinimumSize(980, 600)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setStyleSheet("""
            QWidget {
                background-color: #101018;
                color: #e0e0e0;
                font-family: 'Segoe UI', sans-serif;
            }
            QLabel#choice {
                font-size: 26px;
                font-weight: bold;
                padding: 18px;
                border-radius: 12px;
                background: #1c1d2a;
            }
            QLabel#message {
                font-size: 24px;
                padding: 10px 14px;
                border-radius: 8px;
                background: #181924;
                color: #F5F5FC;
            }
            QLabel#suggestions {
                font-size: 13px;
                color: #888;
            }
            QTextEdit#log {
                background-color: #15151d;
                color: #7ec8a0;
                font-size: 11px;
                border: 1px solid #333;
                border-radius: 4px;
            }
            QPushButton {
                background-color: #2a2a36;
                color: #a0c4ff;
                border: 1px solid #334;
                border-radius: 5px;
                padding: 6px 14px;
                font-size: 12px;
            }
            QPushButton:hover { background-color: #1f1f2a; }
            QPushButton:pressed { background-color: #0e0e14; }
        """)

        root = QHBoxLayout(self)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(10)

        # ---- LEFT: message, choices, preview ---------------------------
        left = QVBoxLayout()
        left.setSpacing(8)

        self._message_label = QLabel("")
        self._message_label.setObjectName("message")
        self._message_label.setWordWrap(True)
        self._message_label.setMinimumHeight(70)
        left.addWidget(self._message_label)

        self._suggestions_label = QLabel("")
        self._suggestions_label.setObjectName("suggestions")
        left.addWidget(self._suggestions_label)

        choices = QHBoxLayout()
        self._left_choice = self._make_choice(Channel.LEFT_SMILE)
        self._right_choice = self._make_choice(Channel.RIGHT_SMILE)
        choices.addWidget(self._left_choice)
        choices.addWidget(self._right_choice)
        left.addLayout(choices)

        self._hold_bar = _LevelBar(QColor(160, 160, 220))
        left.addWidget(self._hold_bar)

        self._camera_label = QLabel()
        self._camera_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._camera_label.setMinimumSize(480, 300)
        self._camera_label.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
        )
        self._camera_label.setStyleSheet(
            "background:#000; border-radius:6px; border:1px solid #334;"
        )
        left.addWidget(self._camera_label, stretch=1)

        root.addLayout(left, stretch=3)

        # ---- RIGHT: meters, calibration, log ----------------------------
        right = QVBoxLayout()
        right.setSpacing(8)

        self._face_label = QLabel("No face")
        self._face_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        right.addWidget(self._face_label)

        self._meters: Dict[Channel, _LevelBar] = {}
        for channel in Channel:
            r, g, b = _CHANNEL_COLORS[channel]
            right.addWidget(QLabel(channel.value.replace("_", " ").title()))
            meter = _LevelBar(QColor(r, g, b))
            self._meters[channel] = meter
            right.addWidget(meter)

        sep = QFrame()
        sep.setFrameShape(QFrame.Shape.HLine)
        right.addWidget(sep)

        right.addWidget(QLabel("Calibrate"))
        for channel in Channel:
            btn = QPushButton(channel.value.replace("_", " ").title())
            btn.clicked.connect(lambda _=False, c=channel: self._on_calibrate(c))
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            right.addWidget(btn)

        right.addWidget(QLabel("Console log"))
        self._log = QTextEdit()
        self._log.setObjectName("log")
        self._log.setReadOnly(True)
        self._log.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        right.addWidget(self._log, stretch=1)

        root.addLayout(right, stretch=1)

    def _make_choice(self, channel: Channel) -> QLabel:
        r, g, b = _CHANNEL_COLORS[channel]
        label = QLabel("")
        label.setObjectName("choice")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setMinimumHeight(140)
        label.setStyleSheet(f"border: 2px solid rgb({r},{g},{b});")
        return label

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------
    def on_view(self, view: NavigatorView) -> None:
        self._left_choice.setText(view.left_label)
        self._right_choice.setText(view.right_label)
        self._message_label.setText(view.message or "…")
        self._suggestions_label.setText(
            "Suggestions: " + ", ".join(view.suggestions) if view.suggestions else ""
        )

    def on_triggers(
        self,
        triggers: TriggerState,
        calibration: Calibration,
        hold_progress: float,
    ) -> None:
        values = {
            Channel.LEFT_SMILE:  (triggers.left_value, triggers.is_triggering_left),
            Channel.RIGHT_SMILE: (triggers.right_value, triggers.is_triggering_right),
            Channel.PUCKER:      (triggers.back_value, triggers.is_triggering_back),
        }
        for channel, (value, active) in values.items():
            self._meters[channel].set_value(
                value, marker=calibration.threshold(channel), active=active,
            )
        self._hold_bar.set_value(hold_progress)

    def on_face(self, tracked: bool) -> None:
        self._face_label.setText("Face tracked" if tracked else "No face")
        self._face_label.setStyleSheet("color:#7ec8a0;" if tracked else "color:#ff6b6b;")

    def on_frame(self, frame: np.ndarray) -> None:
        """Show a BGR frame (already mirrored by the camera)."""
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        h, w, ch = frame_rgb.shape
        img = QImage(frame_rgb.data, w, h, ch * w, QImage.Format.Format_RGB888)
        pix = QPixmap.fromImage(img).scaled(
            self._camera_label.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self._camera_label.setPixmap(pix)

    def on_status(self, msg: str) -> None:
        if msg.startswith("[EVENT]") or msg.startswith("[STATE]"):
            self._log.append(f"<span style='color:#6699cc'>{msg}</span>")
        elif msg.startswith("[ERROR]"):
            self._log.append(f"<span style='color:#ff6b6b'>{msg}</span>")
        else:
            self._log.append(f"<span style='color:#777'>{msg}</span>")
        sb = self._log.verticalScrollBar()
        sb.setValue(sb.maximum())

    # ------------------------------------------------------------------
    def keyPressEvent(self, event: QKeyEvent) -> None:
        action = _DEBUG_KEYS.get(event.key())
        if action is None:
            super().keyPressEvent(event)
            return
        self._on_debug_action(action)


# ---- helper widget: horizontal level bar with a threshold marker --------

class _LevelBar(QWidget):
    def __init__(self, color: QColor, parent=None) -> None:
        super().__init__(parent)
        self._color = color
        self._value = 0.0
        self._marker: Optional[float] = None
        self._active = False
        self.setFixedHeight(12)

    def set_value(self, v: float, marker: Optional[float] = None, active: bool = False) -> None:
        self._value = max(0.0, min(1.0, v))
        self._marker = marker
        self._active = active
        self.update()

    def paintEvent(self, _) -> None:
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        w, h = self.width(), self.height()

        p.setBrush(QBrush(QColor(30, 30, 50)))
        p.setPen(Qt.PenStyle.NoPen)
        p.drawRoundedRect(0, 0, w, h, 4, 4)

        fill = self._color if self._active else self._color.darker(180)
        p.setBrush(QBrush(fill))
        p.drawRoundedRect(0, 0, int(w * self._value), h, 4, 4)

        if self._marker is not None:
            x = int(w * max(0.0, min(1.0, self._marker)))
            p.setPen(QPen(QColor(240, 240, 240), 2))
            p.drawLine(x, 0, x, h)
        p.end()
