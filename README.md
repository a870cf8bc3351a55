# netprobe

A small command-line network probe over IPv4. It can:

- **send** a stream of fixed-size, sequence-numbered packets over UDP or TCP
  and report the throughput,
- **receive** such a stream and report packet count, lost packets and jitter,
- **resolve a host name** and print the IPv4 addresses it maps to.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Usage

```
netprobe [-send|-recv|-host hostname] [-stat yyy] [-rhost hostname] [-rport portnum]
         [-lhost hostname] [-lport portnum] [-proto tcp|udp] [-pktsize bsize]
         [-pktrate txrate] [-pktnum num] [-sbufsize bsize]
```

| Option      | Meaning                                        | Default     |
|-------------|------------------------------------------------|-------------|
| `-send`     | send packets (the default mode)                |             |
| `-recv`     | receive packets and report statistics          |             |
| `-host H`   | look up host name `H`                          |             |
| `-stat`     | statistics interval in milliseconds            | 500         |
| `-rhost`    | accepted, but has no effect                    | 127.0.0.1   |
| `-rport`    | remote port the sender sends to                | 4180        |
| `-lhost`    | local host; shown in the settings only         | 0.0.0.0     |
| `-lport`    | local port the receiver listens on             | 4180        |
| `-proto`    | `udp` or `tcp`                                 | udp         |
| `-pktsize`  | packet size in bytes                           | 1000        |
| `-pktrate`  | rate in bytes per second; 0 for no pause       | 1000        |
| `-pktnum`   | number of packets to send; 0 for no limit      | 0           |
| `-sbufsize` | socket buffer size; shown in the settings only | 1000        |

Command-line details:

- Options may start with one or two dashes and may be shortened to any
  unambiguous prefix (`-pkts 500` is `-pktsize 500`). A value may follow
  as the next argument or after `=` (`--proto=tcp`).
- Arguments that are not options are ignored; `--` ends option parsing.
- Numbers are read leniently: a leading integer is used and text without
  one counts as 0. Port numbers wrap to 16 bits.
- An unknown or ambiguous option, a missing value, `-help`, or running with
  no arguments at all prints the usage line and exits with status 1. A
  `-proto` other than `udp` or `tcp` prints `Invalid protocol` and exits
  with status 1.

### Sending

The sender prints its settings, then sends packets to `127.0.0.1` on
`-rport`. Each packet is `-pktsize` bytes: an 8-byte little-endian sequence
number followed by `A` bytes. After each packet it pauses `pktsize / pktrate`
*milliseconds* (truncated to whole microseconds); with `-pktrate 0` it does
not pause. Every `-stat` milliseconds it prints a line such as

```
Elapsed [500 ms] Pkts [498] Rate [7.97 Mbps]
```

where the counts and elapsed time are cumulative. With `-pktnum N` it stops
after N packets and prints `Sent N packets and exit`. Over TCP it first
connects; if that fails it prints `connect failed` and exits with status 1.

### Receiving

The receiver prints its settings and binds to all interfaces on `-lport`.
Over TCP it accepts one connection and prints
`Accepted connection from ADDR:PORT`. It reads up to `-pktsize` bytes at a
time, takes the sequence number from the start of each read, and every
`-stat` milliseconds prints

```
Elapsed [500 ms] Pkts [498] Lost [0, 0.00%] Jitter [0.01 ms]
```

A jump in sequence numbers counts the skipped numbers as lost. Over TCP it
stops when the peer closes the connection; over UDP it runs until it is
interrupted or a receive error occurs.

### Examples

Start a receiver on UDP port 4180:

```
netprobe -recv -lport 4180
```

In another terminal, send 5000 packets of 1000 bytes:

```
netprobe -send -rport 4180 -pktsize 1000 -pktrate 1000000 -pktnum 5000
```

For TCP, add `-proto tcp` on both sides and start the receiver first.

Look up a host:

```
netprobe -host localhost
```

This prints the name asked for, the official name, the address type (the
numeric value of `AF_INET`), the address length (4) and each address. A
failed lookup prints `gethostbyname failed` and exits with status 1.

## Library use

- `netprobe.config.parse_arguments(argv, prog)` turns arguments (without the
  program name) into a `Config`, raising `UsageError` on bad input;
  `Config.summary_lines()` gives the settings block; `usage(prog)` the usage
  line. `Mode` and `Proto` are the mode and protocol enums.
- `netprobe.stats.SendStats` and `netprobe.stats.ReceiveStats` keep the
  running counters. Their `record_packet` methods take times in seconds and
  return a report line when one is due, otherwise `None`.
  `ReceiveStats.loss_rate()` and `ReceiveStats.average_jitter()` give the
  current figures.
- `netprobe.sender.encode_packet(seq, size)` builds a packet and
  `netprobe.receiver.decode_sequence(data)` reads its sequence number back;
  `netprobe.sender.send_delay(config)` gives `pktsize / pktrate` in seconds.
- `netprobe.sender.run_send(config, out)` returns the number of packets
  sent and raises `ConnectionError` if a TCP connect fails.
  `netprobe.receiver.run_recv(config, out)` returns the final
  `ReceiveStats`. `netprobe.host.lookup_host(name)` returns a `HostInfo` or
  raises `LookupError`, and `netprobe.host.run_host(config, out)` prints and
  returns it. Each runner writes its report to `out` (standard output by
  default).
- `netprobe.cli.main(argv)` runs the command and returns its exit status.

## Limitations

- `-rhost` is parsed but ignored: the sender always sends to 127.0.0.1.
- `-lhost` is not used for binding; the receiver listens on all interfaces.
- `-sbufsize` is only displayed; socket buffer sizes are left as the
  system sets them.
- Only IPv4 is supported, and the receiver handles a single TCP connection.