"""Manual page text for go2rpm --man."""

SYNOPSIS = """\
go2rpm <package>
       go2rpm [--spec <filename> | --srpm] [--workspace <directory>] [--pkg] <package>
       go2rpm --man
       go2rpm --help"""

MANUAL = """\
NAME
    go2rpm - Create RPM packages from Go packages

SYNOPSIS
    go2rpm <package>

    go2rpm [--spec <filename> | --srpm] [--workspace <directory>] [--pkg] <package>

    go2rpm --man

    go2rpm --help

DESCRIPTION
    go2rpm helps packaging Go packages into RPM packages. It clones the
    package repository, looks at its license, imports and documentation
    files and writes a draft RPM SPEC file that you are supposed to read
    and fix up by hand.

OPTIONS
    -h, --help
        Print a brief help message and exit.

    -m, --man
        Print the manual page and exit.

    --spec <filename>
        Save the generated RPM SPEC file into given file. Defaults to
        standard output.

    --srpm
        Fetch the distribution file and build a source RPM package.

    --workspace <directory>
        Specify workspace. It is used to keep SCM checkouts (and SPEC files
        when building a SRPM, unless --spec overrides it). By default a
        temporary directory is used and removed on exit. An existing
        checkout in the workspace is reused.

    [--pkg] <package>
        Import path of the Go package to generate RPM for.

    --log-level {debug,info,warn,error}, --verbose, --debug, --quiet
        Control diagnostic output on standard error.

ENVIRONMENT
    GITHUB_TOKEN
        Token sent with the GitHub API request used to look up the package
        summary.

EXIT STATUS
    0 on success, 2 on usage errors, 1 when cloning, inspecting the
    repository or building the SRPM fails.

EXAMPLES
    go2rpm --srpm github.com/ActiveState/tail
        Generate the SRPM, leaving no other artifacts around.

    go2rpm --workspace ./stuff github.com/ActiveState/tail >golang-github-ActiveState-tail.spec
        Generate the SPEC file, leaving the checked out repository around.

BUGS
    Only GitHub and Google Code get source URLs and summaries filled in.
    The generated SPEC file is a draft.

SEE ALSO
    rpm(8), rpmbuild(8)"""
