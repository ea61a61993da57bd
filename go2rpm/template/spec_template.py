"""RPM spec template for Go library packages."""

SPEC_TEMPLATE = """\
%global debug_package   %{nil}
%global import_path     @PKG@
%global gopath          %{_datadir}/gocode
%global commit          @COMMIT@
%global shortcommit     %(c=%{commit}; echo ${c:0:@SHORTCOMMIT@})

Name:           @NAME@
Version:        0
Release:        0.1.git%{shortcommit}%{?dist}
Summary:        @SUMMARY@
License:        @LICENSE@
URL:            http://%{import_path}
Source0:        @SOURCE@
BuildArch:      noarch
%if 0%{?fedora} < 19 && 0%{?rhel} < 7
ExclusiveArch:  %{ix86} x86_64 %{arm} noarch
%endif

%description
@DESCRIPTION@

%package devel
Requires:       golang
Requires:       golang(@GOREQUIRES@)
Summary:        %{summary}
Provides:       golang(%{import_path}) = %{version}-%{release}

%description devel
%{summary}

This package contains library source intended for building other packages
which use %{import_path}.

%prep
%setup @SETUP@

%build

%install
install -d -p %{buildroot}/%{gopath}/src/%{import_path}
tar cf - $(find -name '*.go') |tar xf - -C %{buildroot}/%{gopath}/src/%{import_path}

%files devel
%doc @DOCFILES@
%{gopath}

%changelog
@CHANGELOG@
"""
