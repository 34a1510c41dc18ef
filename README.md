# signlights

`signlights` has the building blocks for signs made of one or more LED-matrix
digits. It provides:

- colour sequences that produce the next colour to show;
- packed-RGB colour helpers;
- the bookkeeping a set of cooperating sign controllers needs: offsets between
  digits, cycling through styles with a button, low-battery handling, loop
  timing and the names and identifiers used on the radio link.

The package needs nothing outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Colours

`signlights.colors` works with colours packed as `0xRRGGBB` integers.

- `color(red, green, blue)` packs three bytes into one colour.
- `split_color(value)` returns the `(red, green, blue)` bytes of a colour.
- `gamma8(value)` gamma-corrects a byte brightness.
- `color_hsv(hue, saturation=255, value=255)` converts a 16-bit hue to a colour.

`signlights.mathutils.rescale_input(output_min, output_max, input_value)` maps a
byte (0–255) linearly onto another range. The result is truncated toward zero.

## Colour patterns

Each colour pattern has the same interface:

- `reset()` returns the pattern to its start;
- `next_color()` returns the next colour and advances;
- `increment_only(amount)` moves the pattern's position without producing colours;
- `parameter_names()` and `number_of_parameters()` describe the byte parameters
  the pattern takes.

The patterns in `signlights.color_patterns` are:

- `SingleColorPattern(color)` returns the same colour every time.
- `TwoColorPattern(color1, color2)` alternates between two colours. Set
  `color1_duration` and `color2_duration` to 0–255 bytes; they read back as
  1–50 steps.
- `BackgroundPlusThree(background, color1, color2, color3)` shows three colours
  in turn, with the background colour between each one.
- `RainbowColorPattern()` steps around the colour wheel. Assign `hue_increment`
  as a 0–255 byte; it reads back as a hue step of 5–1000.

The patterns in `signlights.fade_patterns` are:

- `ColorFadePattern(*colors)` takes two to four colours. For each colour it fades
  in, holds, fades out and then rests on black. Passing any other number of
  colours raises `TypeError`.
- `TwoColorFadePattern(color1, color2)` shows one colour, fades to black, fades
  up into the other colour, and back again.

Both fade patterns take `color_duration`, `fade_in_duration`,
`fade_out_duration` and `faded_duration` as 0–255 bytes.
`apply_brightness_gamma(brightness)` maps a 0–1 brightness onto a
gamma-corrected one.

Duration changes take effect on the next `reset()`.

```python
from signlights.colors import color
from signlights.color_patterns import TwoColorPattern

pattern = TwoColorPattern(color(255, 0, 0), color(0, 0, 255))
pattern.color1_duration = 0
pattern.color2_duration = 0
pattern.reset()
print([hex(pattern.next_color()) for _ in range(4)])
# ['0xff0000', '0xff', '0xff0000', '0xff']
```

## Controller helpers

`signlights.primary` serves the controller that coordinates the other signs.

- `compute_offsets(column_counts)` returns a `SignOffsets` for each sign,
  left to right. Each one gives the digits and columns on either side of that
  sign.
- `ButtonSequence().press(button)` returns the style index to show. Pressing the
  same button again steps forward; pressing a different button starts again at 0.
- `battery_labels(voltages)` gives labels such as `1=7.20`.
- `should_keep_secondary(local_name, ignore_logo)` drops a sign whose name ends
  in `-15` when `ignore_logo` is true.
- `order_by_position(secondaries, key)` sorts the signs by position.

```python
from signlights.primary import compute_offsets

print(compute_offsets([4, 5, 4])[0])
# SignOffsets(digits_to_left=0, digits_to_right=2, columns_to_left=0, columns_to_right=9)
```

`signlights.power` handles battery state and loop timing.

- `battery_voltage(raw_level)` converts an analog reading into volts.
- `PowerMonitor(low_threshold, normal_threshold).check(voltage)` returns a
  `PowerTransition`. It enters low power below the first threshold and leaves it
  above the second. Between the two it keeps its current mode.
- `LoopTelemetry(interval).tick(now)` counts loop iterations. Once per interval
  it returns a `TelemetryReport`, which has `iterations`, `elapsed_ms` and
  `average_ms`; at other times it returns `None`.

`signlights.sign_setup` covers one sign's start-up settings.

- `selector_value(active_pins)` reads selector pins, most significant first.
- `local_name(position, sign_type)` builds the advertised name, for example
  `3181 LED Controller 2-5`.
- `service_uuid(position)` gives the primary service for position 0 and the
  secondary service otherwise.
- `default_brightness(sign_type, low_brightness)` gives the starting brightness.

`signlights.protocol` holds the service and characteristic UUIDs and
`MAX_STRING_LENGTH`.

## What the package does not do

`signlights` produces colours and makes decisions; it does not light anything.
It does not include:

- a pixel buffer;
- animations that place colours on a sign;
- a compact binary style description;
- a factory that builds patterns from one;
- any radio or Bluetooth communication;
- a command-line program.

These are left to the code that drives the hardware.