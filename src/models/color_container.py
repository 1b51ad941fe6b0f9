"""
Color containers - palettes and prepared per-pixel color buffers

ColorContainer is a mutable palette of packed 24-bit RGB integers.
PreparedColorContainer is the read-only per-pixel gradient produced by
ColorContainer.prepare(), holding a snapshot of the palette it came from.

Behavior for integers outside 0..0xFFFFFF is undefined.
"""

from __future__ import annotations
from typing import Iterable, Iterator, List, Sequence, Tuple

from models.errors import InvalidConfigurationError
from utils.colors import blend, color_to_hex, pack_rgb, round_half_up, unpack_rgb
from utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.COLOR)


class ColorContainer:
    """
    Ordered palette of packed RGB colors

    Reads never fail: an index without a color reads as 0 (black). A
    container with exactly one color returns that color for every index.
    Writes never fail either: an index that does not exist yet appends the
    color to the end instead.

    Example:
        palette = ColorContainer(0xFF0000, 0x0000FF)
        palette.get_at(5)          # 0
        palette.set_at(10, color=0x00FF00)
        palette.colors             # [0xFF0000, 0x0000FF, 0x00FF00]
        prepared = palette.prepare(60)
    """

    def __init__(self, *colors: int):
        self.colors: List[int] = list(colors)

    # === CONSTRUCTORS ===

    @classmethod
    def from_list(cls, colors: Iterable[int]) -> 'ColorContainer':
        return cls(*colors)

    @classmethod
    def from_rgb(cls, rgb: Tuple[int, int, int]) -> 'ColorContainer':
        """Create a single-color container from an (r, g, b) tuple"""
        return cls(pack_rgb(*rgb))

    @classmethod
    def from_container(cls, other: 'ColorContainer') -> 'ColorContainer':
        """Copy constructor; the new container does not share its list"""
        return cls(*other.colors)

    def copy(self) -> 'ColorContainer':
        return ColorContainer.from_container(self)

    # === PROPERTIES ===

    @property
    def single_color(self) -> bool:
        return len(self.colors) == 1

    @property
    def color(self) -> int:
        """First color, or 0 (black) if the container is empty"""
        return self.get_at(0)

    @property
    def size(self) -> int:
        return len(self.colors)

    # === GET ===

    def _lookup(self, index: int) -> int:
        if self.single_color:
            return self.colors[0]
        if 0 <= index < len(self.colors):
            return self.colors[index]
        return 0

    def get_at(self, index: int) -> int:
        """
        Get one color

        Returns the lone color of a single-color container regardless of
        index, otherwise the color at index or 0 when there is none.
        """
        return self._lookup(index)

    def get_many(self, *indices: int) -> List[int]:
        """Colors at each index, in the order requested (no indices -> empty list)"""
        return [self._lookup(i) for i in indices]

    def get_range(self, indices: range) -> List[int]:
        return [self._lookup(i) for i in indices]

    # === SET ===

    def _assign(self, index: int, color: int) -> None:
        if 0 <= index < len(self.colors):
            self.colors[index] = color
        else:
            self.colors.append(color)

    def set_at(self, *indices: int, color: int) -> None:
        """
        Set colors at indices

        Indices are processed in ascending order; any index that is not
        a valid index appends color to the end (not necessarily at that
        index).
        """
        for index in sorted(indices):
            self._assign(index, color)

    def set_range(self, indices: range, color: int) -> None:
        for index in indices:
            self._assign(index, color)

    def append(self, color: int) -> None:
        self.colors.append(color)

    def __iadd__(self, color: int) -> 'ColorContainer':
        self.append(color)
        return self

    # === PREPARATION ===

    def prepare(self, num_leds: int) -> 'PreparedColorContainer':
        """
        Spread the palette along a strip of num_leds pixels

        Palette colors are placed on 'pure' pixels at approximately equal
        intervals. Every other pixel is a blend between the pure pixel it
        belongs to and the next palette color, weighted by its distance
        from that pure pixel. The last segment runs to the end of the strip
        and blends toward the first palette color.

        Args:
            num_leds: Number of pixels to create colors for

        Returns:
            PreparedColorContainer with exactly num_leds colors

        Raises:
            InvalidConfigurationError: If num_leds is not positive
        """
        if num_leds <= 0:
            raise InvalidConfigurationError(
                f"Cannot prepare colors for {num_leds} pixels",
                num_leds=num_leds,
            )

        palette = list(self.colors)
        if len(palette) <= 1:
            fill = palette[0] if palette else 0
            return PreparedColorContainer([fill] * num_leds, palette)

        spacing = num_leds / len(palette)
        pure_pixels = [round_half_up(spacing * p) for p in range(len(palette))]

        prepared: List[int] = []
        for i in range(num_leds):
            for p_index, p in enumerate(pure_pixels):
                offset = i - p
                if offset >= spacing:
                    continue

                if offset <= 0:
                    prepared.append(palette[p_index])
                else:
                    if p_index < len(pure_pixels) - 1:
                        distance = pure_pixels[p_index + 1] - p
                    else:
                        distance = num_leds - p
                    amount = max(0, min(255, round_half_up(offset / distance * 255)))
                    prepared.append(blend(palette[p_index], palette[(p_index + 1) % len(palette)], amount))
                break

        log.debug("Prepared palette", num_leds=num_leds, colors=len(palette))
        return PreparedColorContainer(prepared, palette)

    # === CONVERSION ===

    def to_int(self) -> int:
        return self.color

    def to_rgb(self) -> Tuple[int, int, int]:
        """First color as an (r, g, b) tuple"""
        return unpack_rgb(self.color)

    def to_color_container(self) -> 'ColorContainer':
        return self

    def __str__(self) -> str:
        """Hex colors in brackets, or a bare hex value for a single color"""
        if self.single_color:
            return color_to_hex(self.color)
        return "[" + ", ".join(color_to_hex(c) for c in self.colors) + "]"

    def __repr__(self) -> str:
        return f"ColorContainer({', '.join(hex(c) for c in self.colors)})"

    # === OPERATORS ===

    def __eq__(self, other) -> object:
        if isinstance(other, ColorContainer):
            return self.colors == other.colors
        if isinstance(other, PreparedColorContainer):
            return list(other.original_colors) == self.colors
        if isinstance(other, int) and not isinstance(other, bool):
            return self.single_color and other == self.colors[0]
        return NotImplemented

    def __hash__(self) -> int:
        # Must agree with __eq__: a single color equals its int
        if self.single_color:
            return hash(self.colors[0])
        return hash(tuple(self.colors))

    def __iter__(self) -> Iterator[int]:
        return iter(self.colors)

    def __contains__(self, color: int) -> bool:
        return color in self.colors

    def __len__(self) -> int:
        return len(self.colors)


class PreparedColorContainer:
    """
    Per-pixel colors produced by ColorContainer.prepare()

    original_colors is a copy of the palette taken at preparation time, so
    later changes to the palette do not affect comparisons.
    """

    def __init__(self, colors: Sequence[int], original_colors: Sequence[int]):
        self.colors: Tuple[int, ...] = tuple(colors)
        self.original_colors: Tuple[int, ...] = tuple(original_colors)

    @property
    def size(self) -> int:
        return len(self.colors)

    def get_at(self, index: int) -> int:
        """Color of pixel index, or 0 (black) when out of range"""
        if 0 <= index < len(self.colors):
            return self.colors[index]
        return 0

    def to_color_container(self) -> ColorContainer:
        """A new palette holding the original (unprepared) colors"""
        return ColorContainer(*self.original_colors)

    def __eq__(self, other) -> object:
        if isinstance(other, PreparedColorContainer):
            return self.colors == other.colors and self.original_colors == other.original_colors
        if isinstance(other, ColorContainer):
            return list(self.original_colors) == other.colors
        return NotImplemented

    def __hash__(self) -> int:
        # Equal to the palette it was prepared from, so hash like it
        return hash(self.to_color_container())

    def __iter__(self) -> Iterator[int]:
        return iter(self.colors)

    def __contains__(self, color: int) -> bool:
        return color in self.colors

    def __len__(self) -> int:
        return len(self.colors)

    def __str__(self) -> str:
        return "[" + ", ".join(color_to_hex(c) for c in self.colors) + "]"
