import streamlit as st
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from duplicate_count_exercise.config import BenchmarkConfig
from duplicate_count_exercise.counters import COUNTERS
from duplicate_count_exercise.data_loader import generate_sorted_array
from duplicate_count_exercise.benchmark import run_benchmarks, summarize, run_sweep, estimate_growth
from duplicate_count_exercise.errors import InvalidInputError

st.set_page_config(page_title="Duplicate Counting Benchmark Dashboard", layout="wide")

st.title("Duplicate Counting Benchmark Dashboard")
st.markdown("Compare linear, binary search and merge duplicate counting on sorted random arrays.")

st.sidebar.header("Configuration")

st.sidebar.subheader("Dataset")
dataset_size = st.sidebar.number_input(
    "Array Length (N)",
    min_value=1,
    max_value=2000000,
    value=10000,
    step=1000,
    help="Number of elements in each generated array"
)
value_pool = st.sidebar.number_input(
    "Value Pool (M)",
    min_value=1,
    max_value=2000000,
    value=26,
    help="Values are drawn from [0, M), which bounds the number of distinct values"
)
descending = st.sidebar.checkbox("Sort Descending", value=False)
seed = st.sidebar.number_input("Random Seed", min_value=0, value=42, help="Seed for reproducible arrays")

num_runs = st.sidebar.number_input(
    "Number of Benchmark Runs",
    min_value=1,
    max_value=100,
    value=5,
    help="Number of random arrays to average results over"
)
strict = st.sidebar.checkbox("Strict Mode", value=False,
                             help="Verify sortedness before the sorted-only counters (adds an O(N) scan)")

st.sidebar.markdown("---")
st.sidebar.subheader("Pool Sweep")
run_pool_sweep = st.sidebar.checkbox("Sweep Pool Sizes", value=True)
if run_pool_sweep:
    sweep_points = st.sidebar.slider("Sweep Points", min_value=2, max_value=30, value=10,
                                     help="Number of pool sizes between 1 and N (log spaced)")

col1, col2 = st.columns([1, 3])

with col1:
    run_benchmark = st.button("Run Benchmark", type="primary", use_container_width=True)

with col2:
    direction = "descending" if descending else "ascending"
    st.info(f"Configuration: N = {dataset_size:,}, M <= {value_pool:,}, {direction}, {num_runs} runs")

if 'results' not in st.session_state:
    st.session_state.results = None
if 'sweep' not in st.session_state:
    st.session_state.sweep = None


def sweep_pools(size, points):
    """Log-spaced unique pool sizes from 1 to size."""
    pools = np.unique(np.logspace(0, np.log10(size), num=points).astype(np.int64))
    return [int(p) for p in pools if p >= 1]


def run_benchmark_pipeline():
    """Run the complete benchmark pipeline"""
    progress_bar = st.progress(0)
    status_text = st.empty()

    status_text.text("Generating sample array...")
    sample = generate_sorted_array(dataset_size, value_pool, seed=seed, descending=descending)

    st.markdown("---")
    st.subheader("Sample Array Distribution")
    values, run_lengths = np.unique(sample, return_counts=True)

    dist_fig = go.Figure()
    dist_fig.add_trace(go.Bar(
        x=values,
        y=run_lengths,
        marker=dict(color='steelblue', line=dict(width=1, color='darkblue')),
        name='Run Length',
        hovertemplate='Value %{x}<br>Occurrences: %{y}<extra></extra>',
        opacity=0.7
    ))
    dist_fig.update_layout(
        title="Occurrences per Value",
        xaxis_title="Value",
        yaxis_title="Occurrences",
        height=400,
        showlegend=False
    )
    st.plotly_chart(dist_fig, use_container_width=True)

    col_stats1, col_stats2, col_stats3, col_stats4 = st.columns(4)
    with col_stats1:
        st.metric("Total Elements", f"{len(sample):,}")
    with col_stats2:
        st.metric("Distinct Values", f"{len(values):,}")
    with col_stats3:
        st.metric("Longest Run", f"{run_lengths.max():,}")
    with col_stats4:
        st.metric("Mean Run", f"{run_lengths.mean():.1f}")

    st.markdown("---")
    progress_bar.progress(20)

    status_text.text(f"Running {num_runs} benchmark runs...")
    config = BenchmarkConfig(size=dataset_size, pool=value_pool, log_counts=False, runs=num_runs,
                             seed=seed, descending=descending, strict=strict)
    try:
        rows = summarize(run_benchmarks(config))
    except InvalidInputError as e:
        st.error(f"Benchmark rejected its input: {e}")
        return None, None
    progress_bar.progress(60)

    sweep = None
    if run_pool_sweep:
        status_text.text("Sweeping pool sizes...")
        pools = sweep_pools(dataset_size, sweep_points)
        sweep = run_sweep(dataset_size, pools, runs=num_runs, seed=seed, descending=descending,
                          show_progress=False)

    progress_bar.progress(100)
    status_text.text("Benchmark complete!")

    return pd.DataFrame(rows), sweep


if run_benchmark:
    with st.spinner("Running benchmark..."):
        result_df, sweep = run_benchmark_pipeline()
        if result_df is not None:
            st.session_state.results = result_df
            st.session_state.sweep = sweep

# Display results
if st.session_state.results is not None:
    st.markdown("---")
    st.subheader("Benchmark Results")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Array Length", f"{dataset_size:,}")
    with col2:
        st.metric("Value Pool", f"{value_pool:,}")
    with col3:
        st.metric("Benchmark Runs", num_runs)

    st.dataframe(st.session_state.results, use_container_width=True, hide_index=True)

    st.markdown("---")
    st.subheader("Performance Comparison")

    tab1, tab2 = st.tabs(["Average Time", "Average Touches"])

    with tab1:
        chart_data = st.session_state.results.copy()
        st.bar_chart(chart_data.set_index('Method')['Avg Time (µs)'])

    with tab2:
        chart_data = st.session_state.results.copy()
        st.bar_chart(chart_data.set_index('Method')['Avg Touches'])

    sweep = st.session_state.sweep
    if sweep:
        st.markdown("---")
        st.subheader("Touches vs Value Pool")

        pools = list(sweep)
        colors = {'Linear': '#1f77b4', 'Binary Search': '#ff7f0e', 'Merge': '#2ca02c'}
        sweep_fig = go.Figure()
        for name in COUNTERS:
            sweep_fig.add_trace(go.Scatter(
                x=pools,
                y=[sweep[pool].get(name) for pool in pools],
                mode='lines+markers',
                name=name,
                line=dict(color=colors.get(name, '#7f7f7f'), width=2),
                hovertemplate=f'{name}<br>Pool: %{{x}}<br>Touches: %{{y:.1f}}<extra></extra>'
            ))
        sweep_fig.update_layout(
            title=f"Average Touches vs Pool Size (N = {dataset_size:,})",
            xaxis_title="Value Pool (M)",
            yaxis_title="Average Touches",
            xaxis_type="log",
            yaxis_type="log",
            height=450,
            hovermode='x unified',
            legend=dict(yanchor="top", y=0.99, xanchor="left", x=0.01)
        )
        st.plotly_chart(sweep_fig, use_container_width=True)

        growth_cols = st.columns(len(COUNTERS))
        for idx, name in enumerate(COUNTERS):
            with growth_cols[idx]:
                slope = estimate_growth(pools, [sweep[pool][name] for pool in pools])
                st.metric(f"{name} Growth Exponent", f"{slope:.2f}")
        st.caption("Exponents are fitted on this sweep only; they describe the measurement, not a bound.")

else:
    st.info("Configure your benchmark settings in the sidebar and click 'Run Benchmark' to start.")

    st.markdown("""
    ### How to Use

    1. **Configure Dataset**: Set the array length N and the value pool M
    2. **Choose Order**: Arrays are sorted ascending unless "Sort Descending" is checked
    3. **Set Runs**: Results are averaged over several freshly generated arrays
    4. **Run Benchmark**: Click the "Run Benchmark" button to start the evaluation
    5. **Analyze Results**: Compare times and touches, then check the pool sweep

    ### What the Methods Do

    - **Linear**: touches every element once, exactly N touches on any input
    - **Binary Search**: jumps from run to run, roughly M + M*log(N) touches
    - **Merge**: bisects until a piece starts and ends with the same value; 1 touch for a single value, 2N - 1 when all values differ
    """)
