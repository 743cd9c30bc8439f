from mp4duration.atom import (AtomError, MalformedBox, MalformedContainer,
                              MovieDuration, UNBOUNDED, UnexpectedEndOfStream,
                              duration_from_mvhd, find_next_atom)
from mp4duration.mp4file import duration, file_duration
