import numpy as np
import pandas as pd

from .carbonate_system import carbonate_state
from .exceptions import InvalidInputError

def speciate_frame(df, known=('ALK', 'DIC'), temperature='TC', salinity='S'):
    """
    Solve the carbonate system for every row of a DataFrame.

    df must hold the temperature (°C) and salinity columns plus the two known
    columns named in `known` (any pair accepted by `carbonate_state`).
    Returns a new DataFrame, same index, with TC, S and the full state.
    """
    columns = [temperature, salinity, *known]
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise InvalidInputError(f"DataFrame is missing column(s) {missing}")

    values = {c: df[c].to_numpy(dtype=float) for c in columns}
    state = carbonate_state(
        values[temperature], values[salinity], **{k: values[k] for k in known}
    )

    out = pd.DataFrame(
        {name: np.broadcast_to(v, len(df)) for name, v in state._asdict().items()},
        index=df.index,
    )
    out.insert(0, salinity, values[salinity])
    out.insert(0, temperature, values[temperature])
    return out
