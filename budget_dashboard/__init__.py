"""Top-level package for the Budget Dashboard.

A Streamlit client for a remote budget service.  The main modules are:

* ``categories`` – category label normalisation
* ``aggregation`` – category totals and budget-vs-spent figures
* ``view_state`` – the expense list with its filter and sort selections
* ``gateway`` – the HTTP client for the budget service
* ``visualization`` – functions that generate Plotly figures

To run the dashboard from the command line you can execute:

```bash
streamlit run budget_dashboard/Home.py
```

or ``python run_dashboard.py`` from the project root.
"""

from . import aggregation  # noqa: F401  # re-exported for convenience
from . import categories  # noqa: F401  # re-exported for convenience
from . import view_state  # noqa: F401  # re-exported for convenience

__all__ = ["aggregation", "categories", "view_state"]
