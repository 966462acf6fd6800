import sys
from pathlib import Path
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)
from cb.common.logger import log
from cb.core import config
from cb.core.animator import CounterAnimator
from cb.core.attributes import build_default_configuration
from cb.core.markup import counter_data, render_block
from cb.core.styles import scope_class_for, synthesize
from cb.core.validation import validate_counter_range
from cb.ui.ticker import CounterTicker


# ---------------------------------------------------------------------------
# Preview window
# ---------------------------------------------------------------------------

# Shows one counter block: the animated number and label, a progress bar standing in for the circular sweep, and the
# stylesheet generated for it.
class PreviewWindow(QMainWindow):

    def __init__(self, block_config, memory):
        super().__init__()
        self.setWindowTitle("Counter Block Preview")
        self.block_config = block_config
        self.memory = memory
        self.scope_class = scope_class_for(block_config.get("clientId") or "preview")
        self._ticker = None

        # -- Build UI skeleton --
        central = QWidget()
        self.setCentralWidget(central)
        lay = QVBoxLayout(central)

        self._number_lbl = QLabel()
        self._number_lbl.setAlignment(Qt.AlignCenter)
        self._label_lbl = QLabel(str(block_config.get("counterLabel") or ""))
        self._label_lbl.setAlignment(Qt.AlignCenter)
        self._progress = QProgressBar()
        self._progress.setRange(0, 1000)
        self._progress.setTextVisible(False)
        self._css_view = QPlainTextEdit()
        self._css_view.setReadOnly(True)
        self._css_view.setFont(QFont("Consolas", 9))

        btn_row = QHBoxLayout()
        self._replay_btn = QPushButton("Replay")
        self._replay_btn.clicked.connect(self._replay)
        save_btn = QPushButton("Save")
        save_btn.clicked.connect(self._save)
        btn_row.addStretch(1)
        btn_row.addWidget(save_btn)
        btn_row.addWidget(self._replay_btn)

        lay.addWidget(self._number_lbl)
        lay.addWidget(self._label_lbl)
        lay.addWidget(self._progress)
        lay.addWidget(self._css_view, 1)
        lay.addLayout(btn_row)

        self._apply_style()
        QTimer.singleShot(0, self._replay)

    # ------------------------------------------------------------------ #
    #  Style                                                               #
    # ------------------------------------------------------------------ #

    # Only the flat colors carry over to Qt, the full CSS is shown as text.
    def _apply_style(self):
        cfg = self.block_config
        css = synthesize(cfg, self.scope_class, self.memory)
        self._css_view.setPlainText(css.replace("}", "}\n"))
        self.centralWidget().setStyleSheet(f"background-color: {cfg.get('backgroundColor') or '#fff'};")
        self._number_lbl.setStyleSheet(f"color: {cfg.get('counterNumberColor') or '#000'};")
        self._label_lbl.setStyleSheet(f"color: {cfg.get('counterLabelColor') or '#000'};")
        self._number_lbl.setFont(QFont(str(cfg.get("counterNumberFontFamily") or ""), 28, QFont.Weight.Medium))
        self._label_lbl.setFont(QFont(str(cfg.get("counterLabelFontFamily") or ""), 18))

    # ------------------------------------------------------------------ #
    #  Animation                                                           #
    # ------------------------------------------------------------------ #

    # Every replay gets a brand new animator, they can't be restarted. Replay stays disabled until the current one is
    # done so two tickers never fight over the label.
    def _replay(self):
        if self._ticker is not None:
            self._ticker.deleteLater()
        animator = CounterAnimator.from_data(counter_data(self.block_config), name=self.scope_class)
        self._ticker = CounterTicker(animator, self)
        self._ticker.frame.connect(lambda text, _bg: self._number_lbl.setText(text))
        self._ticker.progressed.connect(lambda p: self._progress.setValue(int(p * 1000)))
        self._ticker.finished.connect(lambda: self._replay_btn.setEnabled(True))
        self._replay_btn.setEnabled(False)
        self._ticker.start()

    # ------------------------------------------------------------------ #
    #  Saving                                                              #
    # ------------------------------------------------------------------ #

    # Writes the configuration and the rendered block markup side by side in the blocks folder.
    def _save(self):
        json_path = config.block_path(self.block_config.get("clientId") or "preview")
        html_path = json_path.with_suffix(".html")
        try:
            config.save_configuration(self.block_config, json_path)
            html_path.write_text(render_block(self.block_config, self.scope_class, self.memory), encoding="utf-8")
        except OSError:
            log.exception(f"Failed to save block to '{json_path.parent}'")
            QMessageBox.critical(self, "Counter Block", f"Could not save to {json_path.parent}")
            return
        log.info(f"Saved rendered block markup to '{html_path}'")
        self.statusBar().showMessage(f"Saved to {json_path.parent}", 3000)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv=None):
    argv = list(sys.argv if argv is None else argv)
    app = QApplication(argv)

    if len(argv) > 1:
        block_config = config.load_configuration(Path(argv[1]))
    else:
        block_config = build_default_configuration(clientId="preview")
    memory = config.load_layout_memory()

    window = PreviewWindow(block_config, memory)
    result = validate_counter_range(block_config)
    if not result:
        QMessageBox.warning(window, "Counter Block", result.message)
    window.show()
    exit_code = app.exec()

    _save_layout_memory(memory)
    sys.exit(exit_code)


def _save_layout_memory(memory):
    try:
        config.save_layout_memory(memory)
    except OSError:
        log.warning("Failed to save layout memory on exit.",exc_info=True)
