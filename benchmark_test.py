import pytest

import benchmark


def test_get_benchmarks():
    assert benchmark.get_benchmarks(["mt32", "fill_bytes64"]) == [
        benchmark.benchmark_mt32, benchmark.benchmark_fill_bytes64]
    with pytest.raises(benchmark.BenchmarkNotFoundError):
        benchmark.get_benchmarks(["mt128"])


def test_get_all_benchmarks():
    assert benchmark.get_all_benchmarks() == [
        benchmark.benchmark_fill_bytes32, benchmark.benchmark_fill_bytes64,
        benchmark.benchmark_mt32, benchmark.benchmark_mt64]


def test_benchmark_returns_bytes_and_time():
    byte_count, elapsed = benchmark.benchmark_fill_bytes32(iterations=2, buffer_size=100)
    assert byte_count == 200
    assert elapsed >= 0
    byte_count, _ = benchmark.benchmark_mt64(iterations=1)
    assert byte_count == 8000


def test_throughput():
    assert benchmark.throughput(2**21, 2.0) == 1.0
    assert benchmark.throughput(10, 0) == float("inf")


def test_report(capsys):
    benchmark.report("mt32", 4000, 0.5)
    assert capsys.readouterr().out == "mt32: 4000 bytes in 0.5000 s (0.01 MiB/s)\n"


def test_print_summary_sorts_fastest_first(capsys):
    benchmark.print_summary([("slow", 2**20, 2.0), ("fast", 2**20, 0.5)])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == ""
    assert lines[1].split() == ["benchmark", "MiB/s"]
    assert lines[2].split() == ["fast", "2.00"]
    assert lines[3].split() == ["slow", "0.50"]


def test_print_summary_empty(capsys):
    benchmark.print_summary([])
    assert capsys.readouterr().out == ""


def test_main_runs_selected_benchmarks(capsys):
    results = benchmark.main(["-n", "1", "-b", "64", "mt64", "fill_bytes32"])
    assert [(name, byte_count) for name, byte_count, _ in results] == [
        ("mt64", 8000), ("fill_bytes32", 64)]
    out = capsys.readouterr().out
    assert "mt64: 8000 bytes in " in out
    assert "fill_bytes32: 64 bytes in " in out
    assert "benchmark" in out.splitlines()[-3]


def test_main_quiet_prints_only_summary(capsys):
    results = benchmark.main(["-q", "-n", "1", "mt32"])
    assert len(results) == 1
    out = capsys.readouterr().out
    assert "bytes in" not in out
    assert out.splitlines()[-1].split()[0] == "mt32"


def test_main_continues_after_failure(monkeypatch, capsys):
    def benchmark_mt32(iterations):
        raise RuntimeError("boom")

    monkeypatch.setattr(benchmark, "benchmark_mt32", benchmark_mt32)
    results = benchmark.main(["-n", "1", "mt32", "mt64"])
    assert [name for name, _, _ in results] == ["mt64"]
    captured = capsys.readouterr()
    assert "Benchmark mt32 failed:" in captured.out
    assert "RuntimeError: boom" in captured.err


def test_main_unknown_benchmark():
    with pytest.raises(SystemExit):
        benchmark.main(["nope"])


def test_main_rejects_bad_iterations():
    with pytest.raises(SystemExit):
        benchmark.main(["-n", "0"])
