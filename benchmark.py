#!/usr/bin/env python3

# standard library modules
import cProfile
import inspect
import re
import traceback

from argparse import ArgumentParser
from time import perf_counter


# modules in this project
import rng_tools

from mersenne_twister import MT19937_64_RNG, MT19937_RNG

WORDS_PER_ROUND = 1000
FILL_BUFFER_SIZE = 64 * 1024


def throughput(byte_count, elapsed):
    """Return MiB/s."""
    return byte_count / elapsed / 2**20 if elapsed else float("inf")


def report(name, byte_count, elapsed):
    print("{}: {} bytes in {:.4f} s ({:.2f} MiB/s)".format(
        name, byte_count, elapsed, throughput(byte_count, elapsed)))


def print_summary(results):
    if not results:
        return
    width = max(len(name) for name, _, _ in results)
    print()
    print("{:<{}}  {:>12}".format("benchmark", width, "MiB/s"))
    for name, byte_count, elapsed in sorted(results, key=lambda r: -throughput(r[1], r[2])):
        print("{:<{}}  {:>12.2f}".format(name, width, throughput(byte_count, elapsed)))


def time_words(rng, iterations):
    get_number = rng.get_number
    start = perf_counter()
    for _ in range(iterations):
        for _ in range(WORDS_PER_ROUND):
            get_number()
    return perf_counter() - start


def time_fill_bytes(rng, iterations, buffer_size):
    buffer = bytearray(buffer_size)
    start = perf_counter()
    for _ in range(iterations):
        rng_tools.fill_bytes(rng, buffer)
    return perf_counter() - start


def benchmark_mt32(iterations):
    """Generate 32-bit words"""
    rng = MT19937_RNG.from_entropy()
    elapsed = time_words(rng, iterations)
    return iterations * WORDS_PER_ROUND * 4, elapsed


def benchmark_mt64(iterations):
    """Generate 64-bit words"""
    rng = MT19937_64_RNG.from_entropy()
    elapsed = time_words(rng, iterations)
    return iterations * WORDS_PER_ROUND * 8, elapsed


def benchmark_fill_bytes32(iterations, buffer_size):
    """Fill a byte buffer from the 32-bit generator"""
    rng = MT19937_RNG.default()
    elapsed = time_fill_bytes(rng, iterations, buffer_size)
    return iterations * buffer_size, elapsed


def benchmark_fill_bytes64(iterations, buffer_size):
    """Fill a byte buffer from the 64-bit generator"""
    rng = MT19937_64_RNG.default()
    elapsed = time_fill_bytes(rng, iterations, buffer_size)
    return iterations * buffer_size, elapsed


class BenchmarkNotFoundError(ValueError):
    pass


def get_benchmarks(names):
    result = []
    for name in names:
        fn = globals().get("benchmark_" + str(name))
        if not callable(fn):
            raise BenchmarkNotFoundError("benchmark {} not found".format(name))
        result.append(fn)
    return result


def get_all_benchmarks():
    return [var for name, var in sorted(globals().items())
            if re.match(r"^benchmark_\w+$", name) and callable(var)]


def main(argv=None):
    parser = ArgumentParser(description="Benchmark the Mersenne Twister generators.")
    parser.add_argument(
        "benchmarks", nargs="*",
        help="Benchmark(s) to run. If not specified, all benchmarks will be run.")
    parser.add_argument(
        "-n", "--iterations", type=int, default=100,
        help="Number of rounds per benchmark (default: %(default)s).")
    parser.add_argument(
        "-b", "--bytes", type=int, default=FILL_BUFFER_SIZE, dest="buffer_size",
        help="Buffer size for the fill_bytes benchmarks (default: %(default)s).")
    parser.add_argument(
        "-p", "--profile", help="Profile benchmarks.", action="store_true")
    parser.add_argument(
        "-q", "--quiet", help="Only show the summary table.", action="store_true")
    args = parser.parse_args(argv)
    if args.iterations <= 0:
        parser.error("iterations must be positive")
    if args.buffer_size < 0:
        parser.error("buffer size must not be negative")
    try:
        benchmarks = get_benchmarks(args.benchmarks) or get_all_benchmarks()
    except BenchmarkNotFoundError as e:
        parser.error(e)

    profile = cProfile.Profile() if args.profile else None
    results = []
    for benchmark in benchmarks:
        name = benchmark.__name__[len("benchmark_"):]
        parameters = inspect.signature(benchmark).parameters
        benchmark_args = {arg: value for arg, value in vars(args).items() if arg in parameters}
        try:
            if profile:
                byte_count, elapsed = profile.runcall(benchmark, **benchmark_args)
            else:
                byte_count, elapsed = benchmark(**benchmark_args)
        except Exception:
            print("Benchmark {} failed:".format(name))
            traceback.print_exc()
            continue
        results.append((name, byte_count, elapsed))
        if not args.quiet:
            report(name, byte_count, elapsed)

    print_summary(results)
    if profile:
        print()
        profile.print_stats(sort="cumulative")
    return results


if __name__ == "__main__":
    main()
