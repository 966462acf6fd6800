from dataclasses import dataclass
from enum import Enum
from cb.common.logger import log
from cb.util import format_number, pad_count

# Fixed gradient the ring locks to once the counter reaches its end value.
COMPLETE_GRADIENT = "linear-gradient(450deg,{color} 48%, transparent 48%)"
MASK_GRADIENT = "linear-gradient(90deg, white 50%, transparent 50%)"


class AnimatorState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


# What one tick renders: the counter text and the background-image for the circle fill.
@dataclass(frozen=True)
class Frame:
    count: int
    text: str
    background: str
    progress: float


# Handles the count-up for a single rendered counter. Pure state, the caller owns the actual timer and calls `tick()`
# every `step_time` milliseconds until `done`.
class CounterAnimator:

    def __init__(self, start=0, end=100, duration=2000, prefix="", suffix="", loader_color="#df00ff", name=""):
        self.name = name
        self.start_value = int(start)
        self.end_value = int(end)
        self.duration = int(duration)
        self.prefix = "" if prefix is None else str(prefix)
        self.suffix = "" if suffix is None else str(suffix)
        self.loader_color = loader_color
        self.state = AnimatorState.IDLE

        # end <= start still gets exactly one frame, it just has nothing to sweep over.
        self.total_steps = self.end_value - self.start_value
        if self.total_steps > 0:
            self.step_time = self.duration / self.total_steps
            self.increment = 360 / self.total_steps
        else:
            self.step_time = 0
            self.increment = 0

        self._count = self.start_value
        self._circle1 = 90
        self._circle2 = 90

        log.debug(f"Initialized counter '{name}' {self.start_value}->{self.end_value} over {duration}ms, step {self.step_time}ms")

    # Builds an animator from a rendered block's data attributes (see cb.core.markup.read_counter_data).
    @classmethod
    def from_data(cls, data, name=""):
        return cls(
            start=data.get("start", 0),
            end=data.get("end", 100),
            duration=data.get("duration", 2000),
            prefix=data.get("prefix", ""),
            suffix=data.get("suffix", ""),
            loader_color=data.get("loaderColor", "#df00ff"),
            name=name,
        )

    @property
    def running(self):
        return self.state == AnimatorState.RUNNING

    @property
    def done(self):
        return self.state == AnimatorState.DONE

    # Idle -> Running. Starting twice does nothing, there is no restart.
    def start(self):
        if self.state == AnimatorState.IDLE:
            self.state = AnimatorState.RUNNING
            log.debug(f"Started counter '{self.name}'")

    # Advances the counter by one step and returns what should be rendered. Returns None once done.
    def tick(self):
        if self.state == AnimatorState.IDLE:
            self.start()
        if self.state == AnimatorState.DONE:
            return None

        count = self._count
        finished = count >= self.end_value
        first_half = (
            f"linear-gradient({format_number(self._circle1)}deg, transparent 50%, white 50%), {MASK_GRADIENT}"
        )
        if finished:
            second_half = COMPLETE_GRADIENT.format(color=self.loader_color)
        else:
            second_half = (
                f"linear-gradient({format_number(self._circle2)}deg, transparent 50%,{self.loader_color} 48%), "
                f"{MASK_GRADIENT}"
            )

        # The first half of the steps sweeps the first layer, then the second layer takes over.
        if count - self.start_value <= self.total_steps / 2:
            self._circle1 += self.increment
            background = first_half
        else:
            self._circle2 += self.increment
            background = second_half

        frame = Frame(
            count=count,
            text=f"{self.prefix} {pad_count(count)} {self.suffix}",
            background=background,
            progress=1.0 if self.total_steps <= 0 else min(1.0, (count - self.start_value) / self.total_steps),
        )

        if finished:
            self.state = AnimatorState.DONE
            log.debug(f"Counter '{self.name}' finished at {count}")
        self._count += 1
        return frame

    # Runs every remaining tick at once. Mostly useful for rendering a final state without a timer.
    def run_to_end(self):
        frames = []
        while not self.done:
            frames.append(self.tick())
        return frames
