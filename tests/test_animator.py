"""Tests for the count-up animator and its QTimer driver.

Covers: cb.core.animator, cb.ui.ticker
"""

import unittest

from PySide6.QtCore import QCoreApplication, QEventLoop, QTimer

from cb.core.animator import COMPLETE_GRADIENT, MASK_GRADIENT, AnimatorState, CounterAnimator
from cb.core.attributes import build_default_configuration
from cb.core.markup import counter_data
from cb.ui.ticker import CounterTicker


# ──────────────────────────────────────────────────────────────────────────
# animator.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestCounterAnimator(unittest.TestCase):

    def test_step_time(self):
        animator = CounterAnimator(start=0, end=100, duration=2000)
        self.assertEqual(animator.total_steps, 100)
        self.assertEqual(animator.step_time, 20)
        self.assertEqual(animator.increment, 3.6)

    def test_counts_to_end_and_stops(self):
        animator = CounterAnimator(start=0, end=100, duration=2000)
        frames = animator.run_to_end()
        counts = [f.text.strip() for f in frames]
        self.assertEqual(len(frames), 101)
        self.assertEqual(counts[:11], ["00", "01", "02", "03", "04", "05", "06", "07", "08", "09", "10"])
        self.assertEqual(counts[-1], "100")
        self.assertTrue(animator.done)
        self.assertIsNone(animator.tick())

    def test_text_with_suffix(self):
        animator = CounterAnimator(start=0, end=5, duration=2000, prefix="", suffix="+")
        texts = [f.text for f in animator.run_to_end()]
        self.assertEqual(texts, [" 00 +", " 01 +", " 02 +", " 03 +", " 04 +", " 05 +"])

    def test_prefix(self):
        animator = CounterAnimator(start=12, end=13, prefix="$", suffix="k")
        self.assertEqual([f.text for f in animator.run_to_end()], ["$ 12 k", "$ 13 k"])

    def test_gradient_sweep(self):
        """First half of the steps sweeps the first layer, then the second, then it locks to the complete ring."""
        animator = CounterAnimator(start=0, end=4, duration=400, loader_color="#df00ff")
        backgrounds = [f.background for f in animator.run_to_end()]
        self.assertEqual(backgrounds, [
            f"linear-gradient(90deg, transparent 50%, white 50%), {MASK_GRADIENT}",
            f"linear-gradient(180deg, transparent 50%, white 50%), {MASK_GRADIENT}",
            f"linear-gradient(270deg, transparent 50%, white 50%), {MASK_GRADIENT}",
            f"linear-gradient(90deg, transparent 50%,#df00ff 48%), {MASK_GRADIENT}",
            "linear-gradient(450deg,#df00ff 48%, transparent 48%)",
        ])

    def test_final_frame_uses_complete_gradient(self):
        animator = CounterAnimator(start=0, end=100, duration=2000, loader_color="#123456")
        last = animator.run_to_end()[-1]
        self.assertEqual(last.background, COMPLETE_GRADIENT.format(color="#123456"))
        self.assertEqual(last.progress, 1.0)

    def test_progress_is_monotonic(self):
        frames = CounterAnimator(start=0, end=10, duration=100).run_to_end()
        progress = [f.progress for f in frames]
        self.assertEqual(progress, sorted(progress))
        self.assertEqual(progress[0], 0.0)

    def test_inverted_range_renders_once(self):
        animator = CounterAnimator(start=50, end=10, duration=2000)
        self.assertEqual(animator.step_time, 0)
        frames = animator.run_to_end()
        self.assertEqual(len(frames), 1)
        self.assertEqual(frames[0].text, " 50 ")
        self.assertTrue(animator.done)

    def test_equal_range_renders_once(self):
        frames = CounterAnimator(start=5, end=5).run_to_end()
        self.assertEqual([f.text for f in frames], [" 05 "])

    def test_state_transitions(self):
        animator = CounterAnimator(start=0, end=1)
        self.assertEqual(animator.state, AnimatorState.IDLE)
        animator.start()
        animator.start()
        self.assertTrue(animator.running)
        animator.tick()
        self.assertEqual(animator.state, AnimatorState.RUNNING)
        animator.tick()
        self.assertEqual(animator.state, AnimatorState.DONE)
        animator.start()
        self.assertTrue(animator.done)

    def test_tick_starts_idle_animator(self):
        animator = CounterAnimator(start=0, end=3)
        frame = animator.tick()
        self.assertEqual(frame.count, 0)
        self.assertTrue(animator.running)

    def test_animators_are_independent(self):
        first = CounterAnimator(start=0, end=3)
        second = CounterAnimator(start=10, end=12)
        first.tick()
        second.tick()
        self.assertEqual(first.tick().count, 1)
        self.assertEqual(second.tick().count, 11)

    def test_from_block_data(self):
        config = build_default_configuration(start=3, end=7, duration=400, counterNumberPrefix="~")
        animator = CounterAnimator.from_data(counter_data(config), name="block-abc")
        self.assertEqual(animator.name, "block-abc")
        self.assertEqual(animator.step_time, 100)
        self.assertEqual(animator.tick().text, "~ 03 +")


# ──────────────────────────────────────────────────────────────────────────
# ticker.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestCounterTicker(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = QCoreApplication.instance() or QCoreApplication([])

    def _run(self, ticker, timeout_ms=5000):
        loop = QEventLoop()
        ticker.finished.connect(loop.quit)
        QTimer.singleShot(timeout_ms, loop.quit)
        ticker.start()
        loop.exec()

    def test_interval_matches_step_time(self):
        ticker = CounterTicker(CounterAnimator(start=0, end=100, duration=2000))
        self.assertEqual(ticker.interval, 20)

    def test_emits_every_frame_then_finishes(self):
        ticker = CounterTicker(CounterAnimator(start=0, end=5, duration=50, suffix="+"))
        texts, done = [], []
        ticker.frame.connect(lambda text, _bg: texts.append(text))
        ticker.finished.connect(lambda: done.append(True))
        self._run(ticker)

        self.assertEqual(texts, [" 00 +", " 01 +", " 02 +", " 03 +", " 04 +", " 05 +"])
        self.assertEqual(done, [True])
        self.assertFalse(ticker.is_active())

    def test_progress_reaches_one(self):
        ticker = CounterTicker(CounterAnimator(start=0, end=3, duration=30))
        progress = []
        ticker.progressed.connect(progress.append)
        self._run(ticker)
        self.assertEqual(progress[-1], 1.0)

    def test_finished_ticker_does_not_restart(self):
        ticker = CounterTicker(CounterAnimator(start=0, end=1, duration=10))
        self._run(ticker)
        ticker.start()
        self.assertFalse(ticker.is_active())

    def test_two_tickers_run_side_by_side(self):
        first = CounterTicker(CounterAnimator(start=0, end=3, duration=30))
        second = CounterTicker(CounterAnimator(start=10, end=14, duration=40))
        first_texts, second_texts = [], []
        first.frame.connect(lambda text, _bg: first_texts.append(text.strip()))
        second.frame.connect(lambda text, _bg: second_texts.append(text.strip()))

        loop = QEventLoop()
        finished = []

        def on_finished():
            finished.append(True)
            if len(finished) == 2:
                loop.quit()

        first.finished.connect(on_finished)
        second.finished.connect(on_finished)
        QTimer.singleShot(5000, loop.quit)
        first.start()
        second.start()
        loop.exec()

        self.assertEqual(first_texts, ["00", "01", "02", "03"])
        self.assertEqual(second_texts, ["10", "11", "12", "13", "14"])


if __name__ == "__main__":
    unittest.main()
